"""Multivariate statistical distance (MSD) at the confidence region bound."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..hotelling import HotellingParameters
from ..linalg import invert, quadratic_form
from .core import Array, Solution
from .verify import _check_handoff


@dataclass(frozen=True)
class MsdBounds:
    """MSD of the two boundary points lying on the line through the mean difference.

    Attributes:
        lower: Smaller of the two boundary MSDs.
        upper: Larger of the two boundary MSDs.
        observed: MSD of the mean difference itself.
        point: Boundary point found by the search.
        opposite: Its reflection through the mean difference.
    """

    lower: float
    upper: float
    observed: float
    point: Array
    opposite: Array


def msd_bounds(solution: Solution, params: HotellingParameters) -> MsdBounds:
    """Compute the MSD confidence bounds from a verified solution.

    The confidence region is symmetric about ``mean_diff``, so the second
    boundary point is ``2 * mean_diff - t``.

    Raises:
        MalformedHandoffError: If the arguments do not fit together.
        ValueError: If the solution has not been verified to lie on the bound.
    """
    n_p = _check_handoff(solution, params)
    if solution.on_boundary is not True:
        raise ValueError(
            "solution must be verified to lie on the confidence region bound "
            f"(on_boundary={solution.on_boundary})"
        )
    s_inv = invert(params.s_pool)
    mean_diff = np.asarray(params.mean_diff, dtype=float)
    point = np.asarray(solution.point, dtype=float)[:n_p].copy()
    opposite = 2.0 * mean_diff - point

    msd_a = float(np.sqrt(quadratic_form(point, s_inv)))
    msd_b = float(np.sqrt(quadratic_form(opposite, s_inv)))
    return MsdBounds(
        lower=min(msd_a, msd_b),
        upper=max(msd_a, msd_b),
        observed=float(np.sqrt(quadratic_form(mean_diff, s_inv))),
        point=point,
        opposite=opposite,
    )


__all__ = ["MsdBounds", "msd_bounds"]
