"""Logging configuration helpers for the quiz game."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int | str = logging.WARNING) -> Logger:
    """Configure basic logging for the application and return the package logger.

    The default level is WARNING so log lines do not interleave with the game
    screen; pass INFO or DEBUG to follow the session flow.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError("Unknown log level.")
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("quiz_champion")
