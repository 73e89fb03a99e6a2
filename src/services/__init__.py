"""
Services for the language name service.

Services:
    - LanguageService: GetLanguageNames HTTP adapter
    - LanguageNameResolver: cached (language, locale) -> display name lookups
"""

from .language_service import LanguageService, build_array_param, parse_names
from .name_resolver import (
    LanguageNameResolver,
    flush_name_cache,
    get_name,
    get_name_resolver,
    get_names,
    set_key,
)

__all__ = [
    "LanguageService",
    "build_array_param",
    "parse_names",
    "LanguageNameResolver",
    "get_name_resolver",
    "get_name",
    "get_names",
    "flush_name_cache",
    "set_key",
]
