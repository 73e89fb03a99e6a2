"""
Structured logging configuration for the language name service.

Routes structlog through stdlib logging so library code can use
`structlog.get_logger()` while applications keep their own handlers.
Output is JSON by default and human-readable in dev mode.

The translator API key travels as a query parameter, so any event field
that could carry it is masked before rendering.

Usage:
    from src.lib.logging import setup_logging

    setup_logging()  # Call once at application startup
"""

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

NOISY_LOGGERS = ("httpx", "httpcore")

SECRET_FIELDS = frozenset({"api_key", "app_id", "appId", "key"})
REDACTED = "***"


def redact_secrets(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask API key fields in an event."""
    for name in SECRET_FIELDS.intersection(event_dict):
        if event_dict[name]:
            event_dict[name] = REDACTED
    return event_dict


def setup_logging(dev_mode: bool | None = None, level: str | None = None) -> None:
    """
    Configure structlog and stdlib logging.

    Args:
        dev_mode: Console output instead of JSON. Defaults to TRANSLATOR_DEV_MODE=1.
        level: Root log level name. Defaults to LOG_LEVEL, then INFO.
    """
    if dev_mode is None:
        dev_mode = os.environ.get("TRANSLATOR_DEV_MODE") == "1"
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")

    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer() if dev_mode else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            redact_secrets,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # httpx logs full request URLs, appId included, at INFO
    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)
