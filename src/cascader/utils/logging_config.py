"""Logging setup shared by the cascader entry points."""

from __future__ import annotations

import logging

from cascader.config import CASCADER_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for command-line use.

    Library modules only create loggers; handlers are installed here.

    Args:
        level: Level name or number. Defaults to ``CASCADER_LOG_LEVEL``.
    """
    resolved = level if level is not None else CASCADER_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``."""
    return logging.getLogger(name)
