"""Provider configuration, loading from environment variables and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from memset_dns.exceptions import InvalidConfig

DEFAULT_BASE_URL = "https://api.memset.com"
_DEFAULT_TTL = 300
_DEFAULT_PROPAGATION_TIMEOUT = 60.0
_DEFAULT_POLLING_INTERVAL = 5.0
_DEFAULT_HTTP_TIMEOUT = 30.0

# Memset ignores any other TTL without reporting an error.
VALID_TTLS = frozenset({0, 300, 600, 1800, 3600, 7200, 10800, 21600, 43200, 86400})


@dataclass(frozen=True)
class ProviderConfig:
    """Settings for the Memset DNS provider. Times are in seconds."""

    auth_token: str
    base_url: str = DEFAULT_BASE_URL
    ttl: int = _DEFAULT_TTL
    propagation_timeout: float = _DEFAULT_PROPAGATION_TIMEOUT
    polling_interval: float = _DEFAULT_POLLING_INTERVAL
    http_timeout: float = _DEFAULT_HTTP_TIMEOUT


def validate_config(config: ProviderConfig | None) -> ProviderConfig:
    """Check a config and return it with defaults filled in.

    Raises:
        InvalidConfig: The config is missing, has no auth token or has a TTL
            Memset does not accept.
    """
    if config is None:
        raise InvalidConfig("memset: the configuration of the DNS provider is nil")
    if not config.auth_token:
        raise InvalidConfig("memset: credentials missing")
    if config.ttl not in VALID_TTLS:
        raise InvalidConfig(f"memset: TTL {config.ttl} is invalid")
    if not config.base_url:
        config = replace(config, base_url=DEFAULT_BASE_URL)
    return config


def _env_number(name: str, default: float, cast: type) -> int | float:
    raw = os.environ.get(name)
    if not raw:
        return cast(default)
    try:
        return cast(raw)
    except ValueError:
        raise InvalidConfig(f"memset: {name} must be a number, got: {raw!r}")


def load_config() -> ProviderConfig:
    """Load the provider configuration from ``MEMSET_*`` environment variables."""
    auth_token = os.environ.get("MEMSET_AUTH_TOKEN")
    if not auth_token:
        raise InvalidConfig("memset: some credentials information are missing: MEMSET_AUTH_TOKEN")

    return ProviderConfig(
        auth_token=auth_token,
        base_url=os.environ.get("MEMSET_BASE_URL", DEFAULT_BASE_URL),
        ttl=_env_number("MEMSET_TTL", _DEFAULT_TTL, int),
        propagation_timeout=_env_number("MEMSET_PROPAGATION_TIMEOUT", _DEFAULT_PROPAGATION_TIMEOUT, float),
        polling_interval=_env_number("MEMSET_POLLING_INTERVAL", _DEFAULT_POLLING_INTERVAL, float),
        http_timeout=_env_number("MEMSET_HTTP_TIMEOUT", _DEFAULT_HTTP_TIMEOUT, float),
    )
