"""Data classes mirroring the Memset DNS API request and response shapes.

``from_dict`` raises ``KeyError``/``TypeError``/``ValueError`` when the fields
that identify a shape are missing or null; the API client relies on that to
tell a success body from an error envelope. Other fields may be absent or
null and fall back to empty values.
"""

from __future__ import annotations

from dataclasses import dataclass


def _required(data: dict, key: str) -> str:
    value = data[key]
    if value is None:
        raise ValueError(f"'{key}' is null")
    return str(value)


@dataclass(frozen=True)
class ZoneReference:
    """A Memset zone resolved from its apex domain."""

    zone_id: str
    domain: str

    def to_dict(self) -> dict:
        return {
            "zone_id": self.zone_id,
            "domain": self.domain,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ZoneReference:
        return cls(
            zone_id=_required(data, "zone_id"),
            domain=data.get("domain") or "",
        )


@dataclass(frozen=True)
class TxtRecord:
    """A TXT record within a Memset zone.

    ``id`` is assigned by Memset and is only set on records returned by the API.
    """

    zone_id: str
    record: str
    address: str
    ttl: int
    type: str = "TXT"
    id: str | None = None

    def to_dict(self) -> dict:
        data = {
            "zone_id": self.zone_id,
            "type": self.type,
            "record": self.record,
            "address": self.address,
            "ttl": self.ttl,
        }
        if self.id is not None:
            data = {"id": self.id, **data}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> TxtRecord:
        return cls(
            id=_required(data, "id"),
            zone_id=str(data.get("zone_id") or ""),
            type=data.get("type") or "TXT",
            record=data.get("record") or "",
            address=data.get("address") or "",
            ttl=int(data.get("ttl") or 0),
        )


@dataclass(frozen=True)
class JobStatus:
    """Status of an asynchronous Memset job such as a DNS reload."""

    id: str
    type: str = ""
    status: str = ""
    service: str = ""
    finished: bool = False
    error: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "status": self.status,
            "service": self.service,
            "finished": self.finished,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict) -> JobStatus:
        return cls(
            id=_required(data, "id"),
            type=data.get("type") or "",
            status=data.get("status") or "",
            service=data.get("service") or "",
            finished=bool(data.get("finished")),
            error=bool(data.get("error")),
        )


@dataclass(frozen=True)
class ApiErrorResponse:
    """Error envelope returned by the Memset API in place of the expected body."""

    error_type: str
    error_code: str
    error: str

    def to_dict(self) -> dict:
        return {
            "error_type": self.error_type,
            "error_code": self.error_code,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ApiErrorResponse:
        return cls(
            error_type=data["error_type"],
            error_code=str(data.get("error_code") or ""),
            error=data["error"],
        )
