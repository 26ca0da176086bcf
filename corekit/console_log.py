"""Coloured single-line console logging."""

from __future__ import annotations

import logging
from datetime import datetime

__all__ = ["ConsoleFormatter", "init_logging"]

_RESET = "\033[0m"


def _prefix(levelno: int) -> str:
    if levelno >= logging.CRITICAL:
        return "\033[30;41mF"
    if levelno >= logging.ERROR:
        return "\033[31mE"
    if levelno >= logging.WARNING:
        return "\033[33mW"
    if levelno >= logging.INFO:
        return "\033[32mI"
    if levelno >= logging.DEBUG:
        return "\033[34mD"
    return "\033[37mT"


class ConsoleFormatter(logging.Formatter):
    """Formats records as a coloured severity letter, time, source and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            "%m%d %H:%M:%S.%f"
        )
        text = (
            f"{_prefix(record.levelno)}{timestamp} "
            f"{record.filename}:{record.lineno}{_RESET} {record.getMessage()}"
        )
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


def init_logging() -> logging.Handler:
    """Send all records of the root logger to standard error, coloured."""
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler.formatter, ConsoleFormatter):
            return handler
    handler = logging.StreamHandler()
    handler.setFormatter(ConsoleFormatter())
    root.addHandler(handler)
    root.setLevel(logging.NOTSET)
    return handler