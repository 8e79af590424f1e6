"""Debug mode management for gtheory.

When debug mode is on, algorithms run extra invariant checks from
:mod:`gtheory.diagnostics.core` on their intermediate and final results
(flow conservation, tree shape, circuit validity). The checks are skipped
otherwise because several of them cost as much as the algorithm itself.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "GTHEORY_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _read_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _read_env()


def is_debug_enabled() -> bool:
    """
    Return whether gtheory debug mode is currently enabled.

    The initial value comes from the ``GTHEORY_DEBUG`` environment variable
    and can be changed at runtime with :func:`set_debug_enabled`.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether invariant checks should run.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_from_env() -> bool:
    """
    Re-read ``GTHEORY_DEBUG`` and apply it.

    Returns
    -------
    bool
        The resulting debug flag.
    """
    set_debug_enabled(_read_env())
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Debug flag to use inside the block.

    Example
    -------
        >>> with debug_context(True):
        ...     result = ford_fulkerson(network)  # conservation is asserted
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
