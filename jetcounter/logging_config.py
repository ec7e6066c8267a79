"""Logging configuration helpers for JetCounter."""

from __future__ import annotations

import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: object) -> int:
    """Map *level* to a logging level; anything unrecognised is INFO."""
    if isinstance(level, bool):
        return logging.INFO
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, int):
            return resolved
    return logging.INFO


def configure_logging(level: object = logging.INFO) -> Logger:
    """Configure basic logging for the application and return its logger.

    *level* may be a name such as ``"DEBUG"``; unknown names and
    non-level values fall back to INFO.
    """
    resolved = _resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logger = logging.getLogger("jetcounter")
    logger.setLevel(resolved)
    return logger
