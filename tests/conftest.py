import sys
from pathlib import Path

import pytest

# Ensure `import enemturbo` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from enemturbo.config import Settings  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="ENEM Turbo",
        stripe_secret_key="sk_test_dummy",
        client_url="http://client.test",
        relay_url="http://relay.test",
        cors_allow_origins=("http://client.test",),
    )
