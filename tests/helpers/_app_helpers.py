from dataclasses import dataclass, field
from typing import Any

from enemturbo.core.checkout import CheckoutSession, GatewayError, Purchase


@dataclass
class FakeGateway:
    session: CheckoutSession = field(
        default_factory=lambda: CheckoutSession(id="cs_test_123", url="https://checkout.stripe.test/c/pay/cs_test_123")
    )
    error: str | None = None
    exception: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def create_session(self, purchase: Purchase, *, success_url: str, cancel_url: str) -> CheckoutSession:
        self.calls.append({"purchase": purchase, "success_url": success_url, "cancel_url": cancel_url})
        if self.error is not None:
            raise GatewayError(self.error)
        if self.exception is not None:
            raise self.exception
        return self.session


def patch_build_gateway(monkeypatch: Any, gateway: FakeGateway) -> None:
    def fake_build_gateway(settings) -> FakeGateway:
        assert settings.stripe_secret_key
        return gateway

    monkeypatch.setattr("enemturbo.server.routers.api.build_gateway", fake_build_gateway)


def forbid_stripe_calls(monkeypatch: Any) -> None:
    def fail_create(**kwargs: Any) -> None:
        raise AssertionError("Stripe must not be called")

    monkeypatch.setattr("stripe.checkout.Session.create", fail_create)
