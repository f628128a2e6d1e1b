"""Shared runtime settings for the relay server, client site and CLI.

This module owns environment-backed application settings. Settings are
resolved once at process entry and handed to the app factories; request
handlers and checks never read the environment themselves.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache

DEFAULT_CLIENT_URL = "http://localhost:5173"
DEFAULT_RELAY_URL = "http://localhost:4242"


@dataclass(frozen=True)
class Settings:
    app_name: str = "ENEM Turbo"
    debug: bool = False
    log_verbosity: str = "medium"
    stripe_secret_key: str | None = None
    client_url: str = DEFAULT_CLIENT_URL
    relay_url: str = DEFAULT_RELAY_URL
    port: int = 4242
    client_port: int = 5173
    cors_allow_origins: tuple[str, ...] = (DEFAULT_CLIENT_URL,)
    currency: str = "brl"
    locale: str = "pt_BR"
    product_name: str = "ENEM Turbo"
    product_price: Decimal = Decimal("99.90")


def _env_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    val = env.get(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(env: Mapping[str, str], name: str, default: str, *, allowed: set[str]) -> str:
    val = env.get(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    val = (env.get(name) or "").strip()
    if not val:
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _env_decimal(env: Mapping[str, str], name: str, default: Decimal) -> Decimal:
    val = (env.get(name) or "").strip()
    if not val:
        return default
    try:
        return Decimal(val)
    except InvalidOperation:
        return default


def settings_from_env(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    client_url = (env.get("CLIENT_URL") or DEFAULT_CLIENT_URL).strip().rstrip("/")
    origins = tuple(
        origin.strip()
        for origin in env.get("CORS_ALLOW_ORIGINS", "").split(",")
        if origin.strip()
    )
    return Settings(
        app_name=env.get("APP_NAME", "ENEM Turbo"),
        debug=_env_bool(env, "DEBUG", default=False),
        log_verbosity=_env_choice(
            env,
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high"},
        ),
        stripe_secret_key=(env.get("STRIPE_SECRET_KEY") or "").strip() or None,
        client_url=client_url,
        relay_url=(env.get("RELAY_URL") or DEFAULT_RELAY_URL).strip().rstrip("/"),
        port=_env_int(env, "PORT", 4242),
        client_port=_env_int(env, "CLIENT_PORT", 5173),
        cors_allow_origins=origins or (client_url,),
        currency=(env.get("CHECKOUT_CURRENCY") or "brl").strip().lower(),
        locale=(env.get("DISPLAY_LOCALE") or "pt_BR").strip(),
        product_name=env.get("PRODUCT_NAME", "ENEM Turbo"),
        product_price=_env_decimal(env, "PRODUCT_PRICE", Decimal("99.90")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return settings_from_env()


__all__ = ["DEFAULT_CLIENT_URL", "DEFAULT_RELAY_URL", "Settings", "get_settings", "settings_from_env"]
