"""Logging utilities for gtheory.

Every module obtains its logger through :func:`get_logger` so that all
library output lives under the ``gtheory`` namespace and can be tuned in
one place. Algorithms only log at DEBUG level; nothing is printed unless
the caller lowers the level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_NAMESPACE = "gtheory"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Defaults applied to loggers created after configuration
_DEFAULT_LEVEL = logging.WARNING
_default_format = _DEFAULT_FORMAT
_default_stream: Optional[TextIO] = None

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(
    level: int, format_string: str, stream: Optional[TextIO] = None
) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. Pass
    ``__name__`` from the calling module; names outside the package are
    nested under ``gtheory.``.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from gtheory.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing edge %d", 3)
    """
    if name is None:
        name = _NAMESPACE

    if name == _NAMESPACE or name.startswith(_NAMESPACE + "."):
        logger_name = name
    else:
        logger_name = f"{_NAMESPACE}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL, _default_format, _default_stream))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for every gtheory logger.

    Args:
        level: Logging level (``logging.DEBUG`` etc.) or its name
            (``'DEBUG'``, ``'INFO'``, ...). Unknown names fall back to WARNING.

    Example:
        >>> import logging
        >>> from gtheory.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
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
    stream: Optional[TextIO] = None,
) -> None:
    """Reconfigure level, format and output stream of all gtheory loggers.

    Existing handlers are replaced, so this is safe to call repeatedly
    (tests do so to capture output in a ``StringIO``).

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses
            ``[LEVEL] name: message``.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _DEFAULT_LEVEL, _default_format, _default_stream
    level = _coerce_level(level)
    fmt = _DEFAULT_FORMAT if format_string is None else format_string

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(level, fmt, stream))

    _DEFAULT_LEVEL = level
    _default_format = fmt
    _default_stream = stream
