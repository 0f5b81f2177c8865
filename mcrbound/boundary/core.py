"""
Problem and solution records for the confidence-region boundary search.

A :class:`Problem` describes the ellipsoidal confidence region

    critical_value = scale * (t - target)^T V^{-1} (t - target)

with ``V = covariance``, together with a starting point for the
Newton-Raphson search. A :class:`Solution` carries the point found by the
search and, once verified, whether that point sits on the region bound.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from ..errors import InvalidInputError

if TYPE_CHECKING:
    from ..hotelling import HotellingParameters

Array = np.ndarray

MAX_ITERATIONS = 100
TOLERANCE = 1e-9


def _as_int(name: str, value, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be an integer >= {minimum}, got {value!r}")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise InvalidInputError(f"{name} must be an integer >= {minimum}, got {value!r}")
    if value < minimum:
        raise InvalidInputError(f"{name} must be an integer >= {minimum}, got {value!r}")
    return int(value)


def _as_nonneg(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a non-negative number, got {value!r}")
    value = float(value)
    if not np.isfinite(value) or value < 0:
        raise InvalidInputError(f"{name} must be a non-negative number, got {value!r}")
    return value


def _as_array(name: str, value, shape: tuple[int, ...]) -> Array:
    try:
        arr = np.array(value, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be numeric: {exc}") from exc
    if arr.shape != shape:
        raise InvalidInputError(f"{name} must have shape {shape}, got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must not contain NaN or infinite values")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Problem:
    """Input of one boundary search; validated on construction.

    Attributes:
        dimension: Number of coordinates of the boundary point.
        scale: Non-negative factor multiplying the quadratic form (``K``).
        target: Centre of the confidence region (mean difference).
        covariance: Pooled variance-covariance matrix, ``dimension x dimension``.
        critical_value: Non-negative right-hand side (``F.crit``).
        initial_guess: Start of the search, length ``dimension + 1``; the
            last entry is the initial Lagrange multiplier.
        max_iterations: Iteration budget, at least 1.
        tolerance: Threshold on the absolute summed score vector.
    """

    dimension: int
    scale: float
    target: Array
    covariance: Array
    critical_value: float
    initial_guess: Array
    max_iterations: int = MAX_ITERATIONS
    tolerance: float = TOLERANCE

    def __post_init__(self) -> None:
        n_p = _as_int("dimension", self.dimension, 1)
        object.__setattr__(self, "dimension", n_p)
        object.__setattr__(self, "scale", _as_nonneg("scale", self.scale))
        object.__setattr__(self, "target", _as_array("target", self.target, (n_p,)))
        object.__setattr__(
            self, "covariance", _as_array("covariance", self.covariance, (n_p, n_p))
        )
        object.__setattr__(
            self, "critical_value", _as_nonneg("critical_value", self.critical_value)
        )
        object.__setattr__(
            self,
            "initial_guess",
            _as_array("initial_guess", self.initial_guess, (n_p + 1,)),
        )
        object.__setattr__(
            self, "max_iterations", _as_int("max_iterations", self.max_iterations, 1)
        )
        object.__setattr__(self, "tolerance", _as_nonneg("tolerance", self.tolerance))

    @classmethod
    def from_hotelling(
        cls,
        params: "HotellingParameters",
        initial_guess: Optional[Array] = None,
        max_iterations: int = MAX_ITERATIONS,
        tolerance: float = TOLERANCE,
    ) -> "Problem":
        """Build a problem from two-sample T² estimates.

        Without an explicit ``initial_guess`` the search starts from a vector
        of ones (coordinates and multiplier alike).
        """
        if initial_guess is None:
            initial_guess = np.ones(int(params.df1) + 1)
        return cls(
            dimension=params.df1,
            scale=params.K,
            target=params.mean_diff,
            covariance=params.s_pool,
            critical_value=params.f_crit,
            initial_guess=initial_guess,
            max_iterations=max_iterations,
            tolerance=tolerance,
        )


@dataclass
class Solution:
    """Outcome of a boundary search.

    ``on_boundary`` is ``None`` until :func:`~mcrbound.boundary.verify_boundary_point`
    has checked the point against the critical value.
    """

    point: Array
    converged: bool
    iterations_used: int
    max_iterations: int
    tolerance: float
    on_boundary: Optional[bool] = None
    score_sum: float = float("nan")
    history: List[Array] = field(default_factory=list)

    @property
    def dimension(self) -> int:
        return int(self.point.size) - 1

    @property
    def boundary_point(self) -> Array:
        """Coordinates of the point, without the multiplier."""
        return self.point[:-1]

    @property
    def multiplier(self) -> float:
        """Final Lagrange multiplier."""
        return float(self.point[-1])


__all__ = [
    "Array",
    "MAX_ITERATIONS",
    "TOLERANCE",
    "Problem",
    "Solution",
]
