"""
Translator service configuration.

Holds the settings every remote call reads: the endpoint, the request
timeout, and the API key. The key is process-wide mutable state in the
default settings object, so it sits behind a lock.

Environment variables:
- TRANSLATOR_API_KEY: API key sent as the appId parameter
- TRANSLATOR_SERVICE_URL: GetLanguageNames endpoint override
- TRANSLATOR_TIMEOUT: request timeout in seconds (default 10)
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field

from src.lib.exceptions import ConfigurationError

DEFAULT_SERVICE_URL = "http://api.microsofttranslator.com/V2/Ajax.svc/GetLanguageNames"
DEFAULT_TIMEOUT = 10.0


@dataclass
class TranslatorSettings:
    """Connection settings for the translator web service."""

    service_url: str = DEFAULT_SERVICE_URL
    timeout: float = DEFAULT_TIMEOUT
    _api_key: str | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @property
    def api_key(self) -> str | None:
        """Return the configured API key, or None."""
        with self._lock:
            return self._api_key

    def set_key(self, api_key: str | None) -> None:
        """Install the API key used by every subsequent remote call."""
        with self._lock:
            self._api_key = api_key

    def has_key(self) -> bool:
        """True when a non-blank API key is set."""
        key = self.api_key
        return bool(key and key.strip())

    def require_key(self) -> str:
        """
        Return the API key or fail.

        Raises:
            ConfigurationError: If no key has been set or it is blank
        """
        key = self.api_key
        if not key or not key.strip():
            raise ConfigurationError(
                "Translator API key is not set. Call set_key() before requesting language names."
            )
        return key

    @classmethod
    def from_env(cls) -> TranslatorSettings:
        """
        Build settings from TRANSLATOR_* environment variables.

        Raises:
            ConfigurationError: If TRANSLATOR_TIMEOUT is not a positive number
        """
        raw_timeout = os.environ.get("TRANSLATOR_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    f"TRANSLATOR_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from exc
            if timeout <= 0:
                raise ConfigurationError(
                    f"TRANSLATOR_TIMEOUT must be positive, got {raw_timeout!r}"
                )

        settings = cls(
            service_url=os.environ.get("TRANSLATOR_SERVICE_URL") or DEFAULT_SERVICE_URL,
            timeout=timeout,
        )
        settings.set_key(os.environ.get("TRANSLATOR_API_KEY"))
        return settings


# Singleton instance
_translator_settings: TranslatorSettings | None = None


def get_translator_settings() -> TranslatorSettings:
    """Get the process-wide default settings, loaded from the environment on first use."""
    global _translator_settings
    if _translator_settings is None:
        _translator_settings = TranslatorSettings.from_env()
    return _translator_settings


def reset_translator_settings() -> None:
    """Drop the default settings so the next access reloads the environment."""
    global _translator_settings
    _translator_settings = None


__all__ = [
    "DEFAULT_SERVICE_URL",
    "DEFAULT_TIMEOUT",
    "TranslatorSettings",
    "get_translator_settings",
    "reset_translator_settings",
]
