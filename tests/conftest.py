"""
Shared test fixtures for the language name service.

This module provides common fixtures used across all test modules:
- Environment setup (dev mode, no real API key)
- TranslatorSettings with a fake key
- A fake GetLanguageNames endpoint on httpx.MockTransport that records requests
- LanguageService and LanguageNameResolver wired to the fake endpoint

No test talks to the real translator service.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator

import httpx
import pytest

# ---------------------------------------------------------------------------
# 1. Environment setup -- must run before any application imports
# ---------------------------------------------------------------------------

os.environ.setdefault("TRANSLATOR_DEV_MODE", "1")
os.environ.pop("TRANSLATOR_API_KEY", None)

from src.config.translator import TranslatorSettings, reset_translator_settings  # noqa: E402
from src.services import name_resolver  # noqa: E402
from src.services.language_service import LanguageService  # noqa: E402
from src.services.name_resolver import LanguageNameResolver  # noqa: E402

FAKE_API_KEY = "test-app-id-0123456789"
FAKE_SERVICE_URL = "http://translator.test/V2/Ajax.svc/GetLanguageNames"


class FakeTranslatorEndpoint:
    """
    In-process stand-in for the GetLanguageNames endpoint.

    Answers every request with one name per requested code, built by
    name_for(). Set `responder` to override the reply for a test.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] | None = None

    @staticmethod
    def name_for(code: str, locale: str) -> str:
        """Deterministic display name returned for `code` in `locale`."""
        return f"{code}@{locale}"

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responder is not None:
            return self.responder(request)
        locale = request.url.params["locale"]
        codes = json.loads(request.url.params["languageCodes"])
        return httpx.Response(200, json=[self.name_for(code, locale) for code in codes])


# ---------------------------------------------------------------------------
# 2. Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_singletons() -> Iterator[None]:
    """Reset process-wide settings and resolver around every test."""
    reset_translator_settings()
    name_resolver._name_resolver = None
    yield
    reset_translator_settings()
    name_resolver._name_resolver = None


@pytest.fixture()
def settings() -> TranslatorSettings:
    """Settings pointing at the fake endpoint, with a fake key installed."""
    settings = TranslatorSettings(service_url=FAKE_SERVICE_URL, timeout=5.0)
    settings.set_key(FAKE_API_KEY)
    return settings


@pytest.fixture()
def endpoint() -> FakeTranslatorEndpoint:
    """The fake endpoint; inspect `.requests` to count remote calls."""
    return FakeTranslatorEndpoint()


@pytest.fixture()
def http_client(endpoint: FakeTranslatorEndpoint) -> Iterator[httpx.Client]:
    """httpx client whose transport is the fake endpoint."""
    client = httpx.Client(transport=httpx.MockTransport(endpoint))
    yield client
    client.close()


@pytest.fixture()
def service(settings: TranslatorSettings, http_client: httpx.Client) -> LanguageService:
    """LanguageService talking to the fake endpoint."""
    return LanguageService(settings=settings, client=http_client)


@pytest.fixture()
def resolver(service: LanguageService) -> LanguageNameResolver:
    """Resolver with an empty cache, backed by the fake endpoint."""
    return LanguageNameResolver(service)
