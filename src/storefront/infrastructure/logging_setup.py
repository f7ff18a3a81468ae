"""Logging configuration for the ``storefront`` logger tree.

Modules log through ``logging.getLogger(__name__)``; only the CLI entry
point calls ``setup_logging``.
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "storefront"


def setup_logging(level: int = logging.WARNING, log_file: Path | None = None) -> logging.Logger:
    """Configure console output and, optionally, a daily rotating log file.

    Safe to call more than once: handlers are only attached the first time,
    later calls just adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized (level=%s)", logging.getLevelName(level))
    return logger
