"""Abstract base class for DNS-01 challenge providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self


class DnsProvider(ABC):
    """Interface an ACME client uses to install and remove DNS-01 challenge TXT records."""

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def present(self, domain: str, token: str, key_auth: str) -> None:
        """Install the TXT record answering the challenge for ``domain``.

        Args:
            domain: Domain being validated (e.g. "example.com" or "*.example.com").
            token: ACME challenge token.
            key_auth: Key authorization derived from the token and account key.
        """

    @abstractmethod
    def cleanup(self, domain: str, token: str, key_auth: str) -> None:
        """Remove the TXT record installed by :meth:`present` for the same arguments."""

    @abstractmethod
    def timeout(self) -> tuple[float, float]:
        """Return (propagation timeout, polling interval) in seconds for the ACME client's DNS checks."""
