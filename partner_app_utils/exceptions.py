"""
Custom exception types for partner-app-utils.

This module defines the small hierarchy of exceptions used by the client layer.
Two families live here:

- Configuration errors, which are raised at process startup when the
  service base URLs cannot be resolved.
- Request failures, which describe why a single HTTP attempt produced no
  data. These are *returned* inside a ``RequestResult`` rather than raised,
  and are collapsed into an absence signal (``None``) before reaching the
  service facades.
"""

from __future__ import annotations

from typing import Any


class PartnerAppError(Exception):
    """Base exception for all partner-app-utils errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(PartnerAppError):
    """Raised when required service configuration is missing.

    Carries the full list of human-readable validation errors so startup code
    can report every missing variable at once.
    """

    def __init__(self, errors: list[str]):
        super().__init__(
            f"Invalid service configuration: {'; '.join(errors)}",
            {"errors": list(errors)},
        )
        self.errors = list(errors)


# ============================================================================
# Request Failures
# ============================================================================


class RequestFailure(PartnerAppError):
    """Base class for the reasons a request attempt produced no data."""

    kind = "failure"

    def __init__(self, url: str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(f"Request to {url} failed: {reason}", {"url": url, **(details or {})})
        self.url = url
        self.reason = reason


class TransportError(RequestFailure):
    """DNS, connection, or other network-level failure."""

    kind = "transport"


class RequestTimeoutError(RequestFailure):
    """The attempt exceeded its deadline and was cancelled."""

    kind = "timeout"

    def __init__(self, url: str, timeout: float):
        super().__init__(url, f"timed out after {timeout}s", {"timeout": timeout})
        self.timeout = timeout


class ProtocolError(RequestFailure):
    """The service answered with a non-2xx status."""

    kind = "protocol"

    def __init__(self, url: str, status: int):
        super().__init__(url, f"HTTP error! status: {status}", {"status": status})
        self.status = status


class DecodeError(RequestFailure):
    """The response body was not valid JSON."""

    kind = "decode"


__all__ = [
    "PartnerAppError",
    "ConfigurationError",
    "RequestFailure",
    "TransportError",
    "RequestTimeoutError",
    "ProtocolError",
    "DecodeError",
]
