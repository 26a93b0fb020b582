"""DNS-01 challenge helpers: record name and value, zone discovery, host labels."""

from __future__ import annotations

import hashlib

import dns.exception
import dns.resolver
import josepy
from acme import challenges

from memset_dns.exceptions import ZoneDiscoveryError


def to_fqdn(name: str) -> str:
    """Return ``name`` with a trailing dot."""
    return name if name.endswith(".") else f"{name}."


def un_fqdn(name: str) -> str:
    """Return ``name`` without its trailing dot."""
    return name.removesuffix(".")


def get_record(domain: str, key_authorization: str) -> tuple[str, str]:
    """Return the (fqdn, value) of the TXT record answering a DNS-01 challenge.

    RFC 8555 §8.4: the record lives at ``_acme-challenge.<domain>.`` (a wildcard
    ``*.example.com`` uses ``example.com``) and holds base64url(SHA-256(key_authorization)).
    """
    base_domain = domain.removeprefix("*.")
    fqdn = to_fqdn(f"{challenges.DNS01.LABEL}.{base_domain}")
    digest = hashlib.sha256(key_authorization.encode("utf-8")).digest()
    return fqdn, josepy.b64encode(digest).decode()


def find_zone_by_fqdn(fqdn: str) -> str:
    """Find the authoritative zone apex for ``fqdn`` by walking the live DNS hierarchy.

    Returns:
        The zone apex as an FQDN (e.g. "example.com.").
    """
    try:
        zone = dns.resolver.zone_for_name(to_fqdn(fqdn))
    except dns.exception.DNSException as err:
        raise ZoneDiscoveryError(f"could not determine zone for domain: '{fqdn}'. {err}") from err
    return zone.to_text()


def record_label(fqdn: str, zone: str) -> str:
    """Strip the zone apex from ``fqdn``, leaving the host label Memset expects.

    Args:
        fqdn: Record name (e.g. "_acme-challenge.sub.example.com.").
        zone: Zone apex, with or without trailing dot (e.g. "example.com.").

    Returns:
        The relative label (e.g. "_acme-challenge.sub"), or "" when ``fqdn``
        is the zone apex itself (a delegated ``_acme-challenge`` zone).
    """
    name = un_fqdn(fqdn)
    apex = un_fqdn(zone)
    if name.lower() == apex.lower():
        return ""
    suffix = f".{apex}"
    if not name.lower().endswith(suffix.lower()):
        raise ValueError(f"Record '{fqdn}' is not under zone '{zone}'")
    return name[: -len(suffix)]
