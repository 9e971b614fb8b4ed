"""
Logging setup for the scrape service.
One stdout handler on the package logger, same format everywhere.
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "ipl_live"

_FORMAT = "%(asctime)s - %(name)s - %(funcName)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configure the `ipl_live` logger (and `main`, which logs endpoint errors).

    Safe to call more than once: handlers are only attached the first time,
    later calls just update the level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    for name in (LOGGER_NAME, "main"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            # Avoid duplicate lines through uvicorn's root handlers
            logger.propagate = False

    return logging.getLogger(LOGGER_NAME)
