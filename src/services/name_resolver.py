"""
Localized language name resolver.

Answers "what is language X called in locale Y" from an in-memory cache,
going to the translator service only on a miss.

Cache strategy:
    - One mapping (language, locale) -> name, owned by the resolver
    - A miss fetches the names of the WHOLE catalog in that locale with a
      single call and caches all of them, since callers asking for one
      name in a locale usually ask for others next
    - A batch is validated before anything is written; a failed or
      short reply leaves the cache untouched
    - Entries live until flushed: flush_name_cache(language) drops one
      language across all locales, flush_all() drops everything
    - Concurrent misses for the same locale are coalesced behind a
      per-locale lock

AUTO_DETECT on either side resolves to "Auto Detect" without touching
the cache or the network.

Usage:
    from src.i18n import Language
    from src.services.name_resolver import get_name, set_key

    set_key("my-api-key")
    get_name(Language.FRENCH, Language.SPANISH)  # "francés"
"""

from __future__ import annotations

import threading

import structlog

from src.config.translator import TranslatorSettings, get_translator_settings
from src.i18n import AUTO_DETECT_NAME, Language, catalog_languages
from src.lib.exceptions import MalformedResponseError
from src.services.language_service import LanguageService

logger = structlog.get_logger()


class LanguageNameResolver:
    """
    Resolves and caches localized language names.

    Thread-safe: the cache is guarded by an RLock, and each locale has a
    fetch lock so only one thread calls the service per uncached locale.

    Args:
        service: Adapter used on cache misses. Defaults to a LanguageService
            bound to the process-wide settings.
    """

    def __init__(self, service: LanguageService | None = None) -> None:
        self.service = service if service is not None else LanguageService()
        self._names: dict[tuple[Language, Language], str] = {}
        self._lock = threading.RLock()
        self._fetch_locks: dict[Language, threading.Lock] = {}

    @property
    def settings(self) -> TranslatorSettings:
        """Settings of the underlying service."""
        return self.service.settings

    def _cached(self, language: Language, locale: Language) -> str | None:
        with self._lock:
            return self._names.get((language, locale))

    def _fetch_lock(self, locale: Language) -> threading.Lock:
        with self._lock:
            lock = self._fetch_locks.get(locale)
            if lock is None:
                lock = self._fetch_locks[locale] = threading.Lock()
            return lock

    def _load_locale(self, locale: Language) -> dict[Language, str]:
        """
        Fetch all catalog names in `locale` and commit them in one step.

        Raises:
            MalformedResponseError: If the reply does not have one name per language
        """
        catalog = catalog_languages()
        names = self.service.fetch_names(locale)
        if len(names) != len(catalog):
            logger.error(
                "language_names_size_mismatch",
                locale=locale.code,
                expected=len(catalog),
                received=len(names),
            )
            raise MalformedResponseError(
                f"Expected {len(catalog)} language names for locale "
                f"{locale.code!r}, got {len(names)}"
            )

        batch = dict(zip(catalog, names, strict=True))
        with self._lock:
            for language, name in batch.items():
                self._names[(language, locale)] = name
        logger.debug("language_names_cached", locale=locale.code, count=len(batch))
        return batch

    def get_name(self, language: Language, locale: Language) -> str:
        """
        Return the name of `language` as written in `locale`.

        Args:
            language: Language to name
            locale: Language the name should be written in

        Returns:
            Localized display name

        Raises:
            ConfigurationError: If a fetch is needed and no API key is set
            ServiceError: If the fetch fails
            MalformedResponseError: If the reply cannot be matched to the catalog
        """
        if language is Language.AUTO_DETECT or locale is Language.AUTO_DETECT:
            return AUTO_DETECT_NAME

        name = self._cached(language, locale)
        if name is not None:
            return name

        with self._fetch_lock(locale):
            # Another thread may have loaded this locale while we waited
            name = self._cached(language, locale)
            if name is not None:
                return name
            return self._load_locale(locale)[language]

    def get_names(self, locale: Language) -> dict[Language, str]:
        """
        Return the names of every catalog language in `locale`, in catalog order.

        Uses the cache when every language is present, otherwise fetches
        the locale once.
        """
        if locale is Language.AUTO_DETECT:
            return dict.fromkeys(catalog_languages(), AUTO_DETECT_NAME)

        names = self._cached_locale(locale)
        if names is not None:
            return names

        with self._fetch_lock(locale):
            names = self._cached_locale(locale)
            if names is not None:
                return names
            return self._load_locale(locale)

    def _cached_locale(self, locale: Language) -> dict[Language, str] | None:
        catalog = catalog_languages()
        with self._lock:
            if not all((language, locale) in self._names for language in catalog):
                return None
            return {language: self._names[(language, locale)] for language in catalog}

    def flush_name_cache(self, language: Language) -> None:
        """Drop every cached name of `language`, in all locales."""
        with self._lock:
            stale = [key for key in self._names if key[0] is language]
            for key in stale:
                del self._names[key]
        logger.debug("language_name_cache_flushed", language=language.code, count=len(stale))

    def flush_all(self) -> None:
        """Drop the whole cache."""
        with self._lock:
            self._names.clear()

    def cached_locales(self, language: Language) -> set[Language]:
        """Locales that currently have a cached name for `language`."""
        with self._lock:
            return {locale for (cached, locale) in self._names if cached is language}

    def set_key(self, api_key: str | None) -> None:
        """Install the API key used by this resolver's service."""
        self.settings.set_key(api_key)


# Singleton instance
_name_resolver: LanguageNameResolver | None = None
_name_resolver_lock = threading.Lock()


def get_name_resolver() -> LanguageNameResolver:
    """Get the process-wide resolver, bound to the default settings."""
    global _name_resolver
    with _name_resolver_lock:
        if _name_resolver is None:
            _name_resolver = LanguageNameResolver(LanguageService(get_translator_settings()))
        return _name_resolver


def set_key(api_key: str | None) -> None:
    """Install the API key for the process-wide resolver."""
    get_name_resolver().set_key(api_key)


def get_name(language: Language, locale: Language) -> str:
    """Localized name of `language` in `locale`, via the process-wide resolver."""
    return get_name_resolver().get_name(language, locale)


def get_names(locale: Language) -> dict[Language, str]:
    """All catalog names in `locale`, via the process-wide resolver."""
    return get_name_resolver().get_names(locale)


def flush_name_cache(language: Language) -> None:
    """Drop cached names of `language` in the process-wide resolver."""
    get_name_resolver().flush_name_cache(language)


__all__ = [
    "LanguageNameResolver",
    "flush_name_cache",
    "get_name",
    "get_name_resolver",
    "get_names",
    "set_key",
]
