"""Hosted-checkout session creation through Stripe.

The relay never stores anything: each purchase becomes exactly one
``checkout.Session.create`` call and the gateway's id/url are passed back
unchanged. No retries and no idempotency key are applied, so a duplicate
purchase produces a duplicate session.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, Protocol

import stripe

if TYPE_CHECKING:
    from ..config import Settings

NOT_CONFIGURED_MESSAGE = "Stripe not configured on server (check .env)."
CHECKOUT_SESSION_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


class CheckoutError(Exception):
    """Base class for checkout relay failures."""


class CheckoutNotConfiguredError(CheckoutError):
    def __init__(self, message: str = NOT_CONFIGURED_MESSAGE) -> None:
        super().__init__(message)


class GatewayError(CheckoutError):
    """The payment gateway rejected the request or could not be reached."""


@dataclass(frozen=True)
class Purchase:
    product_name: str
    unit_price: Decimal
    quantity: int = 1
    email: str | None = None

    @property
    def unit_amount(self) -> int:
        """Unit price in minor currency units (cents)."""
        cents = (self.unit_price * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(cents)


@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str


class CheckoutGateway(Protocol):
    def create_session(
        self,
        purchase: Purchase,
        *,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession: ...


def build_callback_urls(client_url: str) -> tuple[str, str]:
    base = str(client_url or "").strip().rstrip("/")
    return (
        f"{base}/success?session_id={CHECKOUT_SESSION_PLACEHOLDER}",
        f"{base}/cancel",
    )


def session_params(
    purchase: Purchase,
    *,
    currency: str,
    success_url: str,
    cancel_url: str,
) -> dict[str, Any]:
    params: dict[str, Any] = {
        "payment_method_types": ["card"],
        "mode": "payment",
        "line_items": [
            {
                "price_data": {
                    "currency": currency,
                    "product_data": {"name": purchase.product_name},
                    "unit_amount": purchase.unit_amount,
                },
                "quantity": purchase.quantity,
            }
        ],
        "success_url": success_url,
        "cancel_url": cancel_url,
    }
    if purchase.email:
        params["customer_email"] = purchase.email
    return params


class StripeCheckoutGateway:
    """Create Checkout Sessions with a per-request API key.

    The key is passed on each call so the module-level ``stripe.api_key`` is
    never touched.
    """

    def __init__(self, api_key: str, *, currency: str = "brl") -> None:
        if not api_key:
            raise CheckoutNotConfiguredError()
        self._api_key = api_key
        self.currency = currency

    def create_session(
        self,
        purchase: Purchase,
        *,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        params = session_params(
            purchase,
            currency=self.currency,
            success_url=success_url,
            cancel_url=cancel_url,
        )
        try:
            session = stripe.checkout.Session.create(api_key=self._api_key, **params)
        except stripe.StripeError as exc:
            message = getattr(exc, "user_message", None) or str(exc) or "Stripe request failed."
            raise GatewayError(message) from exc
        return CheckoutSession(id=str(session.id), url=str(session.url))


def build_gateway(settings: Settings) -> CheckoutGateway:
    if not settings.stripe_secret_key:
        raise CheckoutNotConfiguredError()
    return StripeCheckoutGateway(settings.stripe_secret_key, currency=settings.currency)


__all__ = [
    "CHECKOUT_SESSION_PLACEHOLDER",
    "NOT_CONFIGURED_MESSAGE",
    "CheckoutError",
    "CheckoutGateway",
    "CheckoutNotConfiguredError",
    "CheckoutSession",
    "GatewayError",
    "Purchase",
    "StripeCheckoutGateway",
    "build_callback_urls",
    "build_gateway",
    "session_params",
]
