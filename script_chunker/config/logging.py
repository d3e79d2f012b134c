"""Logging setup: one stdout handler on the root logger, level from settings."""

import logging
import sys

from script_chunker.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Driver and server loggers that are too chatty at INFO
QUIET_LOGGERS = ("pymongo", "motor", "uvicorn.access")


def configure_logging(level_name: str | None = None) -> None:
    """Install the stdout handler. level_name overrides settings.log_level (unknown names fall back to INFO)."""
    name = (level_name or get_settings().log_level).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
