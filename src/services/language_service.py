"""
Remote call adapter for the translator's GetLanguageNames endpoint.

Builds one GET request asking for the display names of the whole catalog
in a given locale and returns the reply array as received. Matching the
array back onto languages is the resolver's job.

Request:
    GET <service_url>?locale=fr&languageCodes=["ar","bg",...]&appId=<key>

Reply:
    JSON string array, one name per requested code, same order. The
    service may prefix the body with a UTF-8 byte-order mark.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from src.config.translator import TranslatorSettings, get_translator_settings
from src.i18n import Language, catalog_codes
from src.lib.exceptions import MalformedResponseError, ServiceError

logger = structlog.get_logger()

_NAMES_ADAPTER: TypeAdapter[list[str]] = TypeAdapter(list[str])


def build_array_param(codes: Sequence[str]) -> str:
    """
    Encode codes the way the service expects array parameters.

    Example:
        >>> build_array_param(["en", "fr"])
        '["en","fr"]'
    """
    return json.dumps(list(codes), separators=(",", ":"))


def parse_names(body: bytes) -> list[str]:
    """
    Parse a GetLanguageNames reply body into a list of names.

    Raises:
        MalformedResponseError: If the body is not a JSON string array
    """
    try:
        text = body.decode("utf-8-sig")
        return _NAMES_ADAPTER.validate_python(json.loads(text))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise MalformedResponseError(
            f"Translator service returned an unparseable language name list: {exc}"
        ) from exc


class LanguageService:
    """
    HTTP adapter for fetching localized language names.

    Args:
        settings: Endpoint, timeout and API key. Defaults to the process-wide settings.
        client: httpx.Client to send requests with. One is created lazily if omitted.
    """

    def __init__(
        self,
        settings: TranslatorSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_translator_settings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        """The HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.timeout)
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def build_params(self, locale: Language, api_key: str) -> dict[str, str]:
        """Query parameters for a catalog-wide name request in `locale`."""
        return {
            "locale": locale.code,
            "languageCodes": build_array_param(catalog_codes()),
            "appId": api_key,
        }

    def fetch_names(self, locale: Language) -> list[str]:
        """
        Fetch the display names of every catalog language in `locale`.

        The names come back in catalog order, as sent. AUTO_DETECT is not a
        display locale: it yields an empty list without a request.

        Args:
            locale: Language to render the names in

        Returns:
            Names as returned by the service

        Raises:
            ConfigurationError: If no API key is configured
            ServiceError: On network failure or a non-success status
            MalformedResponseError: If the body is not a JSON string array
        """
        api_key = self.settings.require_key()
        if locale is Language.AUTO_DETECT:
            return []

        try:
            response = self.client.get(
                self.settings.service_url,
                params=self.build_params(locale, api_key),
                timeout=self.settings.timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("language_names_timeout", locale=locale.code)
            raise ServiceError(
                f"Translator service timed out after {self.settings.timeout}s"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("language_names_request_failed", locale=locale.code, error=type(exc).__name__)
            raise ServiceError(f"Translator service request failed: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "language_names_bad_status",
                locale=locale.code,
                status_code=response.status_code,
            )
            raise ServiceError(
                f"Translator service returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        names = parse_names(response.content)
        logger.info("language_names_fetched", locale=locale.code, count=len(names))
        return names


__all__ = [
    "LanguageService",
    "build_array_param",
    "parse_names",
]
