"""Memset DNS API client: zone lookup, TXT record create/delete and DNS reload."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Self, TypeVar

import httpx

from memset_dns.config import DEFAULT_BASE_URL
from memset_dns.exceptions import DecodeError, ProviderError, TransportError, ZoneNotFound
from memset_dns.models import ApiErrorResponse, JobStatus, TxtRecord, ZoneReference

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DECODE_ERRORS = (KeyError, TypeError, ValueError)


class MemsetClient:
    """Thin wrapper over the Memset JSON API.

    Every method POSTs a form with a single ``parameters`` field holding the
    JSON-encoded arguments. Memset does not accept a raw JSON body.
    """

    def __init__(
        self,
        auth_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._auth_token = auth_token
        self._base_url = base_url.rstrip("/")
        self._client = _http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def resolve_zone(self, domain: str) -> ZoneReference:
        """Look up the Memset zone serving the apex ``domain``."""
        try:
            return self._call("dns.zone_domain_info", {"domain": domain}, ZoneReference.from_dict)
        except ProviderError as err:
            raise ZoneNotFound(err.error_type, err.error_code, err.message) from err

    def create_txt_record(self, record: TxtRecord) -> TxtRecord:
        """Create ``record`` and return it as stored, including its new ID."""
        params = {
            "zone_id": record.zone_id,
            "type": "TXT",
            "record": record.record,
            "address": record.address,
            "ttl": record.ttl,
        }
        return self._call("dns.zone_record_create", params, TxtRecord.from_dict)

    def delete_txt_record(self, record_id: str) -> TxtRecord:
        return self._call("dns.zone_record_delete", {"id": record_id}, TxtRecord.from_dict)

    def reload(self) -> JobStatus:
        """Ask Memset to publish pending zone changes.

        The reload runs asynchronously; the returned job may not be finished yet.
        """
        return self._call("dns.reload", {}, JobStatus.from_dict)

    def _call(self, method: str, params: dict, decode: Callable[[dict], T]) -> T:
        url = f"{self._base_url}/v1/json/{method}"
        payload = json.dumps({**params, "api_key": self._auth_token}, separators=(",", ":"))
        try:
            resp = self._client.post(url, data={"parameters": payload})
        except httpx.HTTPError as err:
            raise TransportError(f"{method} request failed: {err}") from err
        logger.debug("POST %s - Status: %s", url, resp.status_code)
        return _decode_response(method, resp, decode)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()


def _decode_response(method: str, resp: httpx.Response, decode: Callable[[dict], T]) -> T:
    """Decode the expected shape, falling back to the error envelope."""
    body = resp.text
    try:
        data = json.loads(body)
    except ValueError:
        data = None

    if data is not None:
        try:
            return decode(data)
        except _DECODE_ERRORS:
            pass
        try:
            api_error = ApiErrorResponse.from_dict(data)
        except _DECODE_ERRORS:
            api_error = None
        if api_error is not None:
            raise ProviderError(api_error.error_type, api_error.error_code, api_error.error)

    if resp.is_error:
        raise TransportError(f"{method} returned HTTP {resp.status_code}", status_code=resp.status_code)
    raise DecodeError(f"unexpected response from memset for {method}", body=body)
