"""Logging helpers scoped to the ``easy_cmd`` logger namespace.

Library code only emits records. The package logger carries a
``NullHandler`` so nothing is printed unless the application configures
logging; ``configure_logging`` is what the CLI uses to do that.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

LOGGER_NAMESPACE: Final[str] = "easy_cmd"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that writes to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def configure_logging(level: str = "WARNING", fmt: str | None = None) -> None:
    """Send ``easy_cmd`` log records to standard error.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: Level name (e.g., "INFO", "DEBUG") or number.
        fmt: Optional format string. Defaults to ``DEFAULT_LOG_FORMAT``.
    """

    logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(logger.handlers):
        if isinstance(handler, _StderrHandler):
            logger.removeHandler(handler)
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(normalize_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``easy_cmd`` namespace."""

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def normalize_level(level: str | int) -> int:
    """Map a level name or number to its numeric value, falling back to INFO."""

    if isinstance(level, int):
        return level
    normalized = level.strip().upper()
    if normalized.isdigit():
        return int(normalized)
    value = logging.getLevelName(normalized)
    return value if isinstance(value, int) else logging.INFO
