"""
Confidence-region boundary search and verification.

Example
-------
>>> import numpy as np
>>> from mcrbound.boundary import Problem, solve_boundary
>>> problem = Problem(
...     dimension=1, scale=1.0, target=np.array([3.0]),
...     covariance=np.array([[4.0]]), critical_value=1.0,
...     initial_guess=np.array([4.5, 2.0]),
... )
>>> round(solve_boundary(problem).point[0], 6)
5.0
"""

from .bounds import MsdBounds, msd_bounds
from .core import MAX_ITERATIONS, TOLERANCE, Problem, Solution
from .newton import bordered_hessian, newton_step, score_vector, solve_boundary
from .verify import constraint_value, rounding_digits, verify_boundary_point

__all__ = [
    "MAX_ITERATIONS",
    "TOLERANCE",
    "Problem",
    "Solution",
    "MsdBounds",
    "bordered_hessian",
    "constraint_value",
    "msd_bounds",
    "newton_step",
    "rounding_digits",
    "score_vector",
    "solve_boundary",
    "verify_boundary_point",
]
