"""Diagnostics and debugging utilities for mcrbound."""

from .core import assert_covariance, is_symmetric
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_covariance",
    "is_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
