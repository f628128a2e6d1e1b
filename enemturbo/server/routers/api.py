"""JSON API routes: liveness probe and checkout-session relay."""


import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...config import Settings
from ...core.checkout import (
	CheckoutNotConfiguredError,
	GatewayError,
	build_callback_urls,
	build_gateway,
)
from ..logging import purchase_to_loggable
from ..schemas import CheckoutSessionResponse, ErrorResponse, PurchaseRequest

logger = logging.getLogger("uvicorn.error")
router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/")
def liveness() -> dict:
	return {"ok": True}


@router.post(
	"/create-checkout-session",
	response_model=CheckoutSessionResponse,
	responses={500: {"model": ErrorResponse}},
)
def create_checkout_session(payload: PurchaseRequest, request: Request):
	settings: Settings = request.app.state.settings
	try:
		gateway = build_gateway(settings)
	except CheckoutNotConfiguredError as exc:
		logger.error("Checkout requested but STRIPE_SECRET_KEY is not configured.")
		return _error(500, str(exc))

	purchase = payload.to_purchase()
	success_url, cancel_url = build_callback_urls(settings.client_url)
	logger.debug(
		"Creating checkout session:\n%s",
		json.dumps(
			purchase_to_loggable(
				purchase,
				currency=settings.currency,
				locale=settings.locale,
				verbosity=settings.log_verbosity,
			),
			ensure_ascii=False,
			indent=2,
		),
	)

	try:
		session = gateway.create_session(purchase, success_url=success_url, cancel_url=cancel_url)
	except GatewayError as exc:
		logger.error("Checkout gateway error: %s", exc)
		return _error(500, str(exc))
	except Exception:
		logger.exception("Unexpected checkout failure")
		return _error(500, "Internal checkout error.")

	logger.info("Created checkout session %s", session.id)
	return CheckoutSessionResponse(id=session.id, url=session.url)
