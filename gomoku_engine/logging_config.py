"""Logging setup shared by the engine and its host applications.

The engine modules only ever call ``logging.getLogger(__name__)``; hosts
(a UI shell, a test harness) call :func:`setup_logging` once to attach a
handler and pick a level.

Usage:
    from gomoku_engine.logging_config import setup_logging

    logger = setup_logging("gomoku_engine", level="DEBUG")
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

__all__ = [
    "DEFAULT_FORMAT",
    "configure_from_settings",
    "get_logger",
    "setup_logging",
]


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def setup_logging(
    name: str | None = None,
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure and return a logger with a single console handler.

    Calling this twice for the same name only updates the level; it never
    stacks a second handler.

    Args:
        name: Logger name (None configures the root logger)
        level: Level as an int or a name such as ``"WARNING"``
        fmt: Format string for the console handler

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(_coerce_level(level))

    if not any(getattr(h, "_gomoku_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        handler._gomoku_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the named logger without touching handlers."""
    return logging.getLogger(name)


def configure_from_settings(settings) -> logging.Logger:
    """Configure the ``gomoku_engine`` logger from :class:`EngineSettings`."""
    return setup_logging("gomoku_engine", level=settings.log_level)
