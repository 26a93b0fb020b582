"""Memset DNS provider: install and remove DNS-01 TXT records via the Memset API."""

from __future__ import annotations

import logging
from collections.abc import Callable

from memset_dns.config import ProviderConfig, validate_config
from memset_dns.dns.base import DnsProvider
from memset_dns.dns.challenge import find_zone_by_fqdn, get_record, record_label, un_fqdn
from memset_dns.dns.client import MemsetClient
from memset_dns.dns.record_ids import RecordIdTable
from memset_dns.exceptions import CleanUpFailed, MemsetError, PresentFailed, UnknownRecord
from memset_dns.models import TxtRecord

logger = logging.getLogger(__name__)


class MemsetDnsProvider(DnsProvider):
    """DNS provider backed by the Memset API.

    Memset deletes records by ID only, and cleanup is not told which ID present
    created, so IDs are remembered per FQDN for the lifetime of this instance.
    """

    def __init__(
        self,
        config: ProviderConfig,
        _client: MemsetClient | None = None,
        _zone_finder: Callable[[str], str] | None = None,
        _record_ids: RecordIdTable | None = None,
    ) -> None:
        self._config = validate_config(config)
        self._client = _client or MemsetClient(
            auth_token=self._config.auth_token,
            base_url=self._config.base_url,
            timeout=self._config.http_timeout,
        )
        self._find_zone = _zone_finder or find_zone_by_fqdn
        self._record_ids = _record_ids if _record_ids is not None else RecordIdTable()

    @property
    def record_ids(self) -> RecordIdTable:
        return self._record_ids

    def timeout(self) -> tuple[float, float]:
        return self._config.propagation_timeout, self._config.polling_interval

    def present(self, domain: str, token: str, key_auth: str) -> None:
        fqdn, value = get_record(domain, key_auth)
        try:
            record = self._add_txt_record(fqdn, value)
        except (MemsetError, ValueError) as err:
            raise PresentFailed(f"memset: {err}") from err

        replaced = self._record_ids.put(fqdn, record.id)
        if replaced is not None and replaced != record.id:
            # e.g. example.com and *.example.com share one challenge record name
            logger.warning(
                "Replaced tracked TXT record id %s for %s with %s; the earlier record will not be cleaned up",
                replaced,
                fqdn,
                record.id,
            )
        logger.info("Created TXT record %s (id %s) in Memset zone %s", fqdn, record.id, record.zone_id)

    def cleanup(self, domain: str, token: str, key_auth: str) -> None:
        fqdn, _value = get_record(domain, key_auth)

        record_id = self._record_ids.get(fqdn)
        if record_id is None:
            raise UnknownRecord(f"memset: unknown record ID for '{fqdn}'")

        try:
            self._client.delete_txt_record(record_id)
        except MemsetError as err:
            # Keep the ID so a retried cleanup can still find the record
            raise CleanUpFailed(f"memset: {err}") from err

        self._record_ids.remove(fqdn)
        logger.info("Deleted TXT record %s (id %s) from Memset", fqdn, record_id)

    def _add_txt_record(self, fqdn: str, value: str) -> TxtRecord:
        auth_zone = self._find_zone(fqdn)
        zone = self._client.resolve_zone(un_fqdn(auth_zone))

        new_record = TxtRecord(
            zone_id=zone.zone_id,
            record=record_label(fqdn, auth_zone),
            address=value,
            ttl=self._config.ttl,
        )
        created = self._client.create_txt_record(new_record)
        self._reload(fqdn)
        return created

    def _reload(self, fqdn: str) -> None:
        """Trigger a DNS reload so the new record goes live.

        Failures are logged, not raised: the record exists either way and is
        published by the next reload.
        """
        try:
            job = self._client.reload()
        except MemsetError as err:
            logger.warning("DNS reload after creating %s failed: %s", fqdn, err)
            return

        if job.error:
            logger.warning("DNS reload job %s for %s reported an error (status %s)", job.id, fqdn, job.status)
        elif not job.finished:
            logger.debug("DNS reload job %s for %s is %s", job.id, fqdn, job.status or "pending")

    def close(self) -> None:
        """Close the underlying API client."""
        self._client.close()
