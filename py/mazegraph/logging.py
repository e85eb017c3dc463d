"""Logging utilities for mazegraph.

Every module asks for its logger through ``get_logger(__name__)`` so that
level and output stream can be changed for the whole package at once.
"""

import logging
import sys
from typing import Dict, Optional, Union

from . import config

_loggers: Dict[str, logging.Logger] = {}


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


_level = _resolve_level(config.LOG_LEVEL)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a cached logger under the ``mazegraph`` namespace.

    Args:
        name: Logger name, typically ``__name__``. Defaults to the package logger.

    Returns:
        Logger writing ``[LEVEL] name: message`` lines to stderr.
    """
    if name is None:
        name = "mazegraph"
    logger_name = name if name.startswith("mazegraph") else f"mazegraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_level)
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every mazegraph logger, current and future."""
    global _level
    _level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(level: Union[int, str] = logging.WARNING,
                      stream=None,
                      format_string: Optional[str] = None) -> None:
    """Replace the handlers of every cached logger.

    Args:
        level: Logging level or level name.
        stream: Output stream (default: sys.stderr).
        format_string: Record format (default: ``config.LOG_FORMAT``).
    """
    global _level
    _level = _resolve_level(level)
    formatter = logging.Formatter(format_string or config.LOG_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
