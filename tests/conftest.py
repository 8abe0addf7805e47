"""Shared fixtures."""

import pytest

_ENV_VARS = ("WREN_STRIP_TRAILING_SLASH", "WREN_DEFAULT_METHODS", "WREN_ALLOWED_METHODS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's WREN_* settings out of default-configured tables."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
