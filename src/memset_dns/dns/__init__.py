"""DNS provider factory."""

from __future__ import annotations

from memset_dns.config import ProviderConfig, load_config
from memset_dns.dns.base import DnsProvider
from memset_dns.dns.memset import MemsetDnsProvider


def get_dns_provider(config: ProviderConfig | None = None) -> DnsProvider:
    """Instantiate the Memset DNS provider.

    Args:
        config: Provider configuration. Loaded from ``MEMSET_*`` environment
            variables when omitted.

    Returns:
        A configured DnsProvider instance.
    """
    if config is None:
        config = load_config()
    return MemsetDnsProvider(config)
