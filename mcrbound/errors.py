"""Exception and warning types raised by mcrbound."""

from __future__ import annotations

import numpy as np


class McrBoundError(Exception):
    """Base class for all mcrbound errors."""


class InvalidInputError(McrBoundError, ValueError):
    """A problem field has the wrong type, shape or range."""


class SingularMatrixError(McrBoundError, np.linalg.LinAlgError):
    """A matrix that must be inverted is (numerically) singular."""


class MalformedHandoffError(McrBoundError, TypeError):
    """The verifier received a solution or parameter bundle it cannot use."""


class NonConvergenceWarning(RuntimeWarning):
    """The Newton-Raphson search exhausted its iteration budget."""


__all__ = [
    "McrBoundError",
    "InvalidInputError",
    "SingularMatrixError",
    "MalformedHandoffError",
    "NonConvergenceWarning",
]
