"""FastAPI relay server: forwards checkout intents to Stripe."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env before settings are resolved.
ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(Path.cwd() / ".env")
load_dotenv(ROOT_DIR / ".env")

from ..config import Settings, get_settings
from ..core.checkout import NOT_CONFIGURED_MESSAGE
from .routers import api

logger = logging.getLogger("uvicorn.error")


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = str(error.get("msg") or "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body."


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies answer 500 like other checkout failures; a missing key wins.
    if not request.app.state.settings.stripe_secret_key:
        logger.error("Checkout requested but STRIPE_SECRET_KEY is not configured.")
        return JSONResponse(status_code=500, content={"error": NOT_CONFIGURED_MESSAGE})
    return JSONResponse(status_code=500, content={"error": _format_validation_error(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    fastapi_app = FastAPI(
        title=f"{settings.app_name} Relay",
        summary="Create hosted checkout sessions for the landing page",
        version="1.0.0",
    )
    fastapi_app.state.settings = settings

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_exception_handler(RequestValidationError, _validation_error_handler)

    fastapi_app.include_router(api.router)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Relay server starting on port %s", settings.port)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


__all__ = ["app", "create_app", "logger", "run"]
