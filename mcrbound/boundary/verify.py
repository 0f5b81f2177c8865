"""Check whether a point found by the Newton-Raphson search sits on the bound.

The search stops on a summed score, which does not guarantee that the
constraint holds. The verifier recomputes

    kdvd = K * (t - mean_diff)^T S_pool^{-1} (t - mean_diff)

and compares it with the critical F value after rounding both.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..errors import MalformedHandoffError
from ..hotelling import HotellingParameters
from ..linalg import invert, quadratic_form
from ..logging import get_logger
from .core import Array, Solution

logger = get_logger(__name__)


def rounding_digits(tolerance: float) -> int:
    """Number of decimal places derived from a solution's tolerance.

    The tolerance doubles as the rounding precision of the boundary check. A
    non-integer precision is rounded to the nearest integer, so any tolerance
    below 0.5 compares at zero decimal places.
    """
    return int(math.floor(float(tolerance) + 0.5))


def _check_handoff(solution, params) -> int:
    if not isinstance(solution, Solution):
        raise MalformedHandoffError(
            f"solution must be a Solution returned by solve_boundary(), got {type(solution).__name__}"
        )
    if not isinstance(params, HotellingParameters):
        raise MalformedHandoffError(
            f"params must be HotellingParameters, got {type(params).__name__}"
        )
    point = np.asarray(solution.point)
    if point.ndim != 1 or point.size < 2:
        raise MalformedHandoffError(f"solution.point has invalid shape {point.shape}")
    n_p = int(params.df1)
    if n_p < 1 or n_p != point.size - 1:
        raise MalformedHandoffError(
            f"params.df1 = {n_p} does not fit a solution point of length {point.size}"
        )
    if np.shape(params.mean_diff) != (n_p,):
        raise MalformedHandoffError(
            f"params.mean_diff must have shape ({n_p},), got {np.shape(params.mean_diff)}"
        )
    if np.shape(params.s_pool) != (n_p, n_p):
        raise MalformedHandoffError(
            f"params.s_pool must have shape ({n_p}, {n_p}), got {np.shape(params.s_pool)}"
        )
    return n_p


def constraint_value(point: Array, params: HotellingParameters) -> float:
    """Scaled statistical distance of ``point`` from the mean difference."""
    n_p = int(params.df1)
    t_diff = np.asarray(point, dtype=float)[:n_p] - np.asarray(params.mean_diff, dtype=float)
    return float(params.K) * quadratic_form(t_diff, invert(params.s_pool))


def verify_boundary_point(
    solution: Solution,
    params: HotellingParameters,
    digits: Optional[int] = None,
) -> Solution:
    """Set ``solution.on_boundary`` and return the same solution.

    Args:
        solution: Result of :func:`~mcrbound.boundary.newton.solve_boundary`.
        params: The T² estimates the search was set up from.
        digits: Decimal places for the comparison. Defaults to
            ``rounding_digits(solution.tolerance)``.

    Raises:
        MalformedHandoffError: If either argument has the wrong type or
            inconsistent shapes.
        SingularMatrixError: If ``params.s_pool`` cannot be inverted.
    """
    _check_handoff(solution, params)
    if digits is None:
        digits = rounding_digits(solution.tolerance)

    kdvd = constraint_value(solution.point, params)
    on_boundary = bool(np.round(kdvd, digits) == np.round(float(params.f_crit), digits))
    logger.debug(
        "kdvd = %.10g, F.crit = %.10g, digits = %d -> on boundary: %s",
        kdvd, params.f_crit, digits, on_boundary,
    )
    solution.on_boundary = on_boundary
    return solution


__all__ = ["constraint_value", "rounding_digits", "verify_boundary_point"]
