"""
Logging Configuration
Console logging for the banking chat client and its CLI
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "bank_chat_client"


def setup_logging(level_name: str | None = None) -> logging.Logger:
    """
    Set up the package logger

    Args:
        level_name: Logging level name; falls back to LOG_LEVEL, then WARNING

    Returns:
        Configured package logger
    """
    raw = (level_name or os.getenv("LOG_LEVEL", "WARNING")).upper()
    level = getattr(logging, raw, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    return logger
