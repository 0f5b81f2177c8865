"""Debug mode switch for mcrbound.

While debug mode is on, :func:`~mcrbound.boundary.solve_boundary` checks
that the covariance is symmetric positive definite before inverting it and
keeps every Newton-Raphson iterate in ``Solution.history``. The initial state
comes from the ``MCRBOUND_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "MCRBOUND_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """Return whether debug mode is currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous state on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     solution = solve_boundary(problem)  # doctest: +SKIP
    >>> len(solution.history) > 0  # doctest: +SKIP
    True
    """
    prev = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)
