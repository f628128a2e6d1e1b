"""Price display helpers shared by the client pages and the relay logs."""

from decimal import Decimal

from babel.numbers import format_currency


def format_price(amount: Decimal | float | int | None, currency: str | None, *, locale: str = "en_US") -> str:
    if amount is None:
        return ""
    value = Decimal(str(amount))
    currency_code = str(currency or "").upper()
    if not currency_code:
        return f"{value:.2f}"
    try:
        return format_currency(value, currency_code, locale=locale)
    except (ValueError, LookupError):
        return f"{value:.2f} {currency_code}"


__all__ = ["format_price"]
