"""Check that the dotenv reference template and the live ``.env`` are in place."""


import re
from pathlib import Path

from .report import EnvCheckOutcome, Severity

DEFAULT_EXAMPLE_NAME = ".env.example"
DEFAULT_ENV_NAME = ".env"
DEFAULT_REQUIRED_KEY = "STRIPE_SECRET_KEY"


def _key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*(?:export\s+)?{re.escape(key)}\s*=", re.MULTILINE)


def env_declares_key(content: str, key: str) -> bool:
    return _key_pattern(key).search(content) is not None


def check_env_file(
    root: str | Path,
    *,
    example: str = DEFAULT_EXAMPLE_NAME,
    env: str = DEFAULT_ENV_NAME,
    required_key: str = DEFAULT_REQUIRED_KEY,
) -> EnvCheckOutcome:
    """Evaluate dotenv presence with three severities.

    Missing reference template is fatal, a missing ``.env`` only warns, and a
    present ``.env`` without ``required_key`` is fatal.
    """
    root_path = Path(root)
    example_path = root_path / example
    env_path = root_path / env

    if not example_path.is_file():
        return EnvCheckOutcome(
            severity=Severity.FATAL,
            messages=[f"{example} not found; add one for reference."],
            fatal_code=1,
        )
    messages = [f"{example} found"]

    if not env_path.is_file():
        messages.append(f"{env} not found. Use {example} to create your {env} with keys.")
        return EnvCheckOutcome(severity=Severity.WARNING, messages=messages)

    content = env_path.read_text(encoding="utf-8", errors="replace")
    if not env_declares_key(content, required_key):
        messages.append(f"{required_key} not present in {env}")
        return EnvCheckOutcome(severity=Severity.FATAL, messages=messages, fatal_code=2)

    messages.append(
        f"{required_key} found in {env} (verify it is the correct key for your environment)"
    )
    return EnvCheckOutcome(severity=Severity.OK, messages=messages)


__all__ = [
    "DEFAULT_ENV_NAME",
    "DEFAULT_EXAMPLE_NAME",
    "DEFAULT_REQUIRED_KEY",
    "check_env_file",
    "env_declares_key",
]
