"""
Lib package for the language name service.

Contains shared utilities:
- exceptions.py: Exception hierarchy (ServiceError, ConfigurationError, MalformedResponseError)
- logging.py: structlog + stdlib logging setup
"""

from src.lib.exceptions import (
    ConfigurationError,
    LanguageServiceException,
    MalformedResponseError,
    ServiceError,
)
from src.lib.logging import setup_logging

__all__ = [
    # Exceptions
    "LanguageServiceException",
    "ServiceError",
    "ConfigurationError",
    "MalformedResponseError",
    # Logging
    "setup_logging",
]
