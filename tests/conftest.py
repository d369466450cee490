from typing import Generator

import pytest

from ens_pricing.config import ENV_DISPLAY_TZ, ENV_SCALE_DIGITS, reset_settings


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test with default settings, regardless of the developer's environment."""
    monkeypatch.delenv(ENV_SCALE_DIGITS, raising=False)
    monkeypatch.delenv(ENV_DISPLAY_TZ, raising=False)
    reset_settings()
    yield
    reset_settings()
