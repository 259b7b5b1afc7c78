"""Shared logging utilities for consistent matcher observability.

Usage example:
    from neighbourhood_match.observability.logging import get_logger

    logger = get_logger("neighbourhood_match.match_run", level="DEBUG")
    logger.info("Ranking %s neighbourhoods", len(catalogue))
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LogLevelError(ValueError):
    """Raised when a log level name is not supported."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Unsupported log level {level!r}. Use one of: {', '.join(LOG_LEVELS)}")


def parse_log_level(level: str) -> int:
    """Translate a level name (case-insensitive) to a logging constant."""
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise LogLevelError(level)
    return logging.getLevelNamesMapping()[name]


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).
        level: Optional level name applied on every call (defaults to INFO on first use).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    if level is not None:
        logger.setLevel(parse_log_level(level))
    return logger
