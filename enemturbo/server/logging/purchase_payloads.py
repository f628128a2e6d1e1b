from typing import Any

from ...core.checkout import Purchase
from ...core.pricing import format_price

_LOW_PRODUCT_NAME_LIMIT = 40
_SUPPORTED_VERBOSITIES = {"low", "medium", "high"}


def _truncate(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str | None) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def mask_email(email: str | None) -> str:
    text = str(email or "").strip()
    local, sep, domain = text.partition("@")
    if not sep:
        return "***" if text else ""
    return f"{local[:1]}***@{domain}"


def purchase_to_loggable(
    purchase: Purchase,
    *,
    currency: str,
    locale: str = "en_US",
    verbosity: str | None = None,
) -> dict[str, Any]:
    """Log-safe summary of a purchase.

    ``high`` keeps the full email, the other levels mask it. Only ``low``
    trims the product name, and it also drops the derived minor-unit amount.
    Prices are formatted for ``locale``.
    """
    level = _normalize_verbosity(verbosity)

    if level == "high":
        return {
            "product_name": purchase.product_name,
            "unit_price": format_price(purchase.unit_price, currency, locale=locale),
            "unit_amount": purchase.unit_amount,
            "quantity": purchase.quantity,
            "email": purchase.email,
        }

    summary = {
        "product_name": purchase.product_name,
        "unit_price": format_price(purchase.unit_price, currency, locale=locale),
        "unit_amount": purchase.unit_amount,
        "quantity": purchase.quantity,
        "email": mask_email(purchase.email),
    }
    if level == "low":
        summary["product_name"] = _truncate(purchase.product_name, limit=_LOW_PRODUCT_NAME_LIMIT)
        summary.pop("unit_amount")
    return summary
