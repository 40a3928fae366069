"""Structured logging configuration using structlog.

Development runs get pretty-printed console output; production runs emit
one JSON object per line so log lines can be shipped alongside the app's
crash reports.

Usage:
    from src.core.logging import get_logger, configure_logging

    # At application startup
    configure_logging(development=True)  # or False for production

    # In modules
    logger = get_logger(__name__)
    logger.info("items_loaded", source="information", count=12)
"""

import logging
import sys
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        development: If True, use pretty-printed output. If False, use JSON.
                    If None, reads from ENVIRONMENT env var (default: development).
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR).
                  If None, reads from LOG_LEVEL env var (default: INFO).
    """
    if development is None:
        env = getenv("ENVIRONMENT", "development").lower()
        development = env != "production"

    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO").upper()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if development:
        processors: list[Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by an embedding host
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)

    # asyncio debug chatter is noisy while a spin is ticking
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent log calls.

    Example:
        bind_contextvars(source="back_door")
        logger.info("spin_started")  # Will include source
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    """Remove specific context variables.

    Args:
        *keys: Names of context variables to remove.
    """
    structlog.contextvars.unbind_contextvars(*keys)
