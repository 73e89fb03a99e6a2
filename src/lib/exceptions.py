"""
Custom exception hierarchy for the language name service.

All exceptions inherit from LanguageServiceException, enabling a
catch-all for service errors while keeping the ability to catch
specific error types:

- ServiceError: anything that went wrong talking to the remote service
- ConfigurationError: missing API key or invalid settings
- MalformedResponseError: a reply that cannot be mapped onto the catalog

An unknown language code is not an error; from_code() returns None.
"""

from __future__ import annotations


class LanguageServiceException(Exception):
    """Base exception for all language name service errors."""


class ServiceError(LanguageServiceException):
    """Remote service failures (connection refused, timeouts, non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(ServiceError):
    """Missing API key or invalid configuration values."""


class MalformedResponseError(ServiceError):
    """Reply body is not a string array or does not match the catalog size."""
