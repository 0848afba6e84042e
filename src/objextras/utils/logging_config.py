"""Logging configuration helpers.

Library modules only create loggers and emit DEBUG records; handlers are
installed by the application, optionally through ``setup_logging``.

Usage:
    from objextras.utils import get_logger, setup_logging

    setup_logging("DEBUG")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", format_string: str | None = None) -> None:
    """Configure root logging for an application using objextras.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        format_string: Custom format string (defaults to DEFAULT_FORMAT).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def setup_logging_from_settings() -> None:
    """Configure logging from OBJEXTRAS_LOG_* environment settings.

    Requires the ``config`` extra (pydantic-settings).
    """
    from objextras.config import LoggingSettings

    settings = LoggingSettings()
    setup_logging(settings.level, settings.format)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
