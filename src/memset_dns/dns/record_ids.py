"""Thread-safe map of challenge FQDN to the Memset record ID created for it."""

from __future__ import annotations

import threading


class RecordIdTable:
    """FQDN → record ID store shared by concurrent present/cleanup calls.

    Cleanup receives no record ID from the ACME client, so the ID returned when
    the record was created is kept here until the record is deleted. The lock
    is only held for the dict access, never across an API call.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids: dict[str, str] = {}

    def put(self, fqdn: str, record_id: str) -> str | None:
        """Track ``record_id`` for ``fqdn``, returning the ID it replaced, if any."""
        with self._lock:
            previous = self._ids.get(fqdn)
            self._ids[fqdn] = record_id
            return previous

    def get(self, fqdn: str) -> str | None:
        with self._lock:
            return self._ids.get(fqdn)

    def remove(self, fqdn: str) -> None:
        with self._lock:
            self._ids.pop(fqdn, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current entries."""
        with self._lock:
            return dict(self._ids)

    def __contains__(self, fqdn: object) -> bool:
        with self._lock:
            return fqdn in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
