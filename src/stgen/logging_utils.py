"""Structured logging setup for the command line tool."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str | int = logging.INFO) -> None:
    """Route all loggers through one JSON handler on stderr."""
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )
    )
    root_logger.addHandler(handler)

    # request lines from httpx are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
