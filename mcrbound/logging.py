"""Logging utilities for mcrbound.

All loggers live below the ``mcrbound`` namespace, write to stderr with a
``[LEVEL] name: message`` format and do not propagate to the root logger, so
an application embedding the package keeps control over its own handlers.
The boundary solver logs each iteration at DEBUG level and non-convergence
at WARNING level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_PACKAGE = "mcrbound"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Level applied to loggers created from now on
_DEFAULT_LEVEL = logging.WARNING

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualified(name: Optional[str]) -> str:
    if name is None or name == _PACKAGE:
        return _PACKAGE
    if name.startswith(_PACKAGE + "."):
        return name
    return f"{_PACKAGE}.{name}"


def _attach_handler(logger: logging.Logger, level: int, stream, fmt: str) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger below the ``mcrbound`` namespace.

    Loggers are cached to avoid duplicate handlers. Pass ``__name__`` from
    the calling module; names outside the package are prefixed.

    Example:
        >>> from mcrbound.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("starting boundary search")
    """
    logger_name = _qualified(name)
    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        _attach_handler(logger, _DEFAULT_LEVEL, sys.stderr, _FORMAT)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every mcrbound logger and handler.

    Args:
        level: Logging level constant or its name ('DEBUG', 'INFO', ...).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of all mcrbound loggers.

    Typically called once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    stream = sys.stderr if stream is None else stream
    fmt = _FORMAT if format_string is None else format_string

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        _attach_handler(logger, level, stream, fmt)

    _DEFAULT_LEVEL = level


__all__ = ["get_logger", "set_log_level", "configure_logging"]
