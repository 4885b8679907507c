"""Logger configuration for the engine adapter.

Diagnostics go to standard error with the level as a capitalised prefix, so an
unrecoverable condition reads ``Error: <message>``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LOGGER_NAME = "bestmove"
_DEFAULT_LOG_LEVEL = logging.INFO


class PrefixFormatter(logging.Formatter):
    """Render records as ``<Level>: <message>``."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        return f"{record.levelname.capitalize()}: {message}"


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever ``sys.stderr`` is when it emits."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


_DEFAULT_HANDLER = StderrHandler()
_DEFAULT_HANDLER.setFormatter(PrefixFormatter("%(message)s"))


def _configure_logger(logger: logging.Logger, level: int) -> None:
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if _DEFAULT_HANDLER not in logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: Optional[str] = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a logger under the package namespace.

    Only the package root carries the stderr handler; child loggers reach it by
    propagation, and the package root does not pass records on to the root
    logger.
    """
    root = logging.getLogger(_DEFAULT_LOGGER_NAME)
    _configure_logger(root, level)
    return logging.getLogger(name or _DEFAULT_LOGGER_NAME)
