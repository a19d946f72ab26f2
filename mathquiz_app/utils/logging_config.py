"""Logging configuration helpers for the quiz application."""

from __future__ import annotations

import logging
from logging import Logger
import os

LOG_LEVEL_ENV_VAR = "MATHQUIZ_LOG_LEVEL"


def configure_logging() -> Logger:
    """Configure basic logging for the application and return the package logger."""
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("mathquiz_app")
