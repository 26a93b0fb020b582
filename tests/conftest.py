"""Shared test fixtures for memset-dns."""

import pytest

_MEMSET_ENV = (
    "MEMSET_AUTH_TOKEN",
    "MEMSET_BASE_URL",
    "MEMSET_TTL",
    "MEMSET_PROPAGATION_TIMEOUT",
    "MEMSET_POLLING_INTERVAL",
    "MEMSET_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_memset_env(monkeypatch):
    """Keep MEMSET_* variables from the outer environment out of the tests."""
    for name in _MEMSET_ENV:
        monkeypatch.delenv(name, raising=False)
