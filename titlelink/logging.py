"""
Logging setup for the titlelink package.

Modules log through ``logging.getLogger(__name__)``; this only decides where
those records end up.
"""

import logging
import sys
from datetime import datetime
from typing import Union


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} [{record.levelname:8}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: Union[int, str] = logging.INFO, name: str = "titlelink") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Logging level (int or name such as "DEBUG")
        name: Logger to configure, the package root by default

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []  # Clear existing handlers

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ConsoleFormatter())
    logger.addHandler(handler)

    return logger
