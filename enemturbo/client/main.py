"""FastAPI client site: renders the landing page and checkout call-to-action."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

# Load .env before settings are resolved.
ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(Path.cwd() / ".env")
load_dotenv(ROOT_DIR / ".env")

from ..config import Settings, get_settings
from . import routes

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"

logger = logging.getLogger("uvicorn.error")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    fastapi_app = FastAPI(
        title=settings.app_name,
        summary="Landing page with a hosted-checkout call-to-action",
        version="1.0.0",
    )
    fastapi_app.state.settings = settings
    fastapi_app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    fastapi_app.include_router(routes.router)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Client site starting on port %s (relay: %s)", settings.client_port, settings.relay_url)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.client_port)


__all__ = ["BASE_DIR", "STATIC_DIR", "app", "create_app", "logger", "run"]
