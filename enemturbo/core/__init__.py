"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CheckoutError": ("enemturbo.core.checkout", "CheckoutError"),
    "CheckoutNotConfiguredError": ("enemturbo.core.checkout", "CheckoutNotConfiguredError"),
    "CheckoutSession": ("enemturbo.core.checkout", "CheckoutSession"),
    "GatewayError": ("enemturbo.core.checkout", "GatewayError"),
    "Purchase": ("enemturbo.core.checkout", "Purchase"),
    "StripeCheckoutGateway": ("enemturbo.core.checkout", "StripeCheckoutGateway"),
    "build_callback_urls": ("enemturbo.core.checkout", "build_callback_urls"),
    "build_gateway": ("enemturbo.core.checkout", "build_gateway"),
    "check_env_file": ("enemturbo.core.checks", "check_env_file"),
    "check_forbidden_files": ("enemturbo.core.checks", "check_forbidden_files"),
    "check_required_files": ("enemturbo.core.checks", "check_required_files"),
    "find_root_sibling": ("enemturbo.core.checks", "find_root_sibling"),
    "scan_for_extensions": ("enemturbo.core.checks", "scan_for_extensions"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
