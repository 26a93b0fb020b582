"""Exception hierarchy for the Memset DNS-01 provider.

MemsetError (base)
├─ InvalidConfig        - bad provider configuration (also a ValueError)
├─ TransportError       - network failure or HTTP error status
├─ ProviderError        - Memset API returned its error envelope
│  └─ ZoneNotFound      - zone lookup was rejected by the API
├─ DecodeError          - response matched neither the expected nor the error shape
├─ ZoneDiscoveryError   - authoritative zone could not be found in DNS
├─ UnknownRecord        - cleanup without a tracked record ID (also a LookupError)
├─ PresentFailed        - present() failed; the step's error is the __cause__
└─ CleanUpFailed        - cleanup() failed; the delete error is the __cause__
"""

from __future__ import annotations


class MemsetError(Exception):
    """Base exception for all Memset DNS provider errors."""


class InvalidConfig(MemsetError, ValueError):
    """Provider configuration is invalid. Fix the config; retrying will not help."""


class TransportError(MemsetError):
    """The request did not complete (connection failure, timeout or HTTP error status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderError(MemsetError):
    """The Memset API reported a structured failure."""

    def __init__(self, error_type: str, error_code: str, message: str) -> None:
        super().__init__(f"unexpected response from memset: {error_type} - {message}")
        self.error_type = error_type
        self.error_code = error_code
        self.message = message


class ZoneNotFound(ProviderError):
    """The zone lookup for a domain was rejected by the Memset API."""


class DecodeError(MemsetError):
    """A response body did not match any known Memset response shape."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body


class ZoneDiscoveryError(MemsetError):
    """The authoritative zone for a record name could not be determined."""


class UnknownRecord(MemsetError, LookupError):
    """No record ID is tracked for the FQDN being cleaned up."""


class PresentFailed(MemsetError):
    """Installing the challenge TXT record failed."""


class CleanUpFailed(MemsetError):
    """Removing the challenge TXT record failed."""
