"""Public package entrypoint for ENEM Turbo.

This package provides the checkout relay server, the landing-page client site
and the pre-start project checks.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Settings": ("enemturbo.config", "Settings"),
    "create_client_app": ("enemturbo.client.main", "create_app"),
    "create_relay_app": ("enemturbo.server.main", "create_app"),
    "get_settings": ("enemturbo.config", "get_settings"),
}

try:
    __version__ = version("enemturbo")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Settings",
    "__version__",
    "create_client_app",
    "create_relay_app",
    "get_settings",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
