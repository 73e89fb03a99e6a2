"""
Language catalog for the translator service.

Every language the remote service can translate is a member of the
Language enum. The member value is the service's short code, which is
also what str() returns. AUTO_DETECT is a sentinel with an empty code:
it is a valid source language but never a display locale, so it is left
out of the catalog order.

The catalog order matters. Name lookups send the codes in this order and
read the reply array back in the same order.
"""

from __future__ import annotations

from enum import Enum

# Display name for the auto-detect sentinel, in every locale
AUTO_DETECT_NAME = "Auto Detect"


class Language(Enum):
    """Languages supported by the translator service, keyed by service code."""

    AUTO_DETECT = ""
    ARABIC = "ar"
    BULGARIAN = "bg"
    CHINESE_SIMPLIFIED = "zh-CHS"
    CHINESE_TRADITIONAL = "zh-CHT"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HAITIAN_CREOLE = "ht"
    HEBREW = "he"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"

    @property
    def code(self) -> str:
        """The service code for this language ("" for AUTO_DETECT)."""
        return str(self.value)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_code(cls, code: str) -> Language | None:
        """
        Find the language for a service code.

        Args:
            code: Service code, e.g. "fr" or "zh-CHS". "" is AUTO_DETECT.

        Returns:
            The matching Language, or None if the code is unknown
        """
        if not isinstance(code, str):
            return None
        for language in cls:
            if language.code == code:
                return language
        return None


def from_code(code: str) -> Language | None:
    """Module-level alias for Language.from_code()."""
    return Language.from_code(code)


def all_languages() -> tuple[Language, ...]:
    """Every member, AUTO_DETECT first."""
    return tuple(Language)


def catalog_languages() -> tuple[Language, ...]:
    """The ordered catalog used for name lookups (AUTO_DETECT excluded)."""
    return tuple(language for language in Language if language is not Language.AUTO_DETECT)


def catalog_codes() -> list[str]:
    """Service codes of catalog_languages(), in catalog order."""
    return [language.code for language in catalog_languages()]


__all__ = [
    "AUTO_DETECT_NAME",
    "Language",
    "all_languages",
    "catalog_codes",
    "catalog_languages",
    "from_code",
]
