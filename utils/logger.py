"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
Repositories may be called from several threads sharing one pool, so
records carry the thread name.
"""

import logging
import sys
from typing import Optional, TextIO

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_HANDLER_NAME = "northwind-dao"


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Install (or reconfigure) the project's stream handler on the root logger.

    Calling it again replaces the handler instead of stacking a second one.

    Args:
        level: Level name such as "DEBUG"; defaults to ``config.LOG_LEVEL``.
        stream: Where records go; defaults to stdout.

    Returns:
        The installed handler.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel((level or LOG_LEVEL).upper())
    # psycopg2 debug output repeats every statement
    logging.getLogger("psycopg2").setLevel(logging.WARNING)
    return handler


def get_logger(name: str) -> logging.Logger:
    """Named logger; sets up the shared handler on first use."""
    if not any(h.get_name() == _HANDLER_NAME for h in logging.getLogger().handlers):
        configure_logging()
    return logging.getLogger(name)
