"""Newton-Raphson search for points on a confidence region bound.

The point ``t`` on the bound is found with the method of Lagrange multipliers:
``t^T V^{-1} t`` is extremized subject to

    critical_value = scale * (t - target)^T V^{-1} (t - target),

and the first-order conditions of the Lagrangian are solved as one non-linear
system in ``y = (t, lambda)`` by multivariate Newton-Raphson (Connolly 2000).

The stopping rule compares the absolute value of the *sum* of the score
entries with the tolerance. Entries of opposite sign can cancel in that sum,
so convergence alone does not prove the constraint holds; run
:func:`~mcrbound.boundary.verify.verify_boundary_point` on the result.
"""

from __future__ import annotations

import warnings

import numpy as np

from ..diagnostics import assert_covariance, is_debug_enabled
from ..errors import NonConvergenceWarning
from ..linalg import invert, quadratic_form, solve
from ..logging import get_logger
from .core import Array, Problem, Solution

logger = get_logger(__name__)


def score_vector(y: Array, vc_inv: Array, problem: Problem) -> Array:
    """First partial derivatives of the Lagrangian, stacked with the constraint."""
    n_p = problem.dimension
    t_val = y[:n_p]
    lam = y[n_p]
    kk = problem.scale
    t_diff = t_val - problem.target

    f_deriv1 = 2.0 * vc_inv @ t_val - 2.0 * lam * kk * vc_inv @ t_diff
    g_deriv1 = problem.critical_value - kk * quadratic_form(t_diff, vc_inv)
    return np.append(f_deriv1, g_deriv1)


def bordered_hessian(y: Array, vc_inv: Array, problem: Problem) -> Array:
    """Second partial derivatives, bordered by the constraint gradient."""
    n_p = problem.dimension
    lam = y[n_p]
    kk = problem.scale
    t_diff = y[:n_p] - problem.target

    hess = np.zeros((n_p + 1, n_p + 1))
    hess[:n_p, :n_p] = 2.0 * vc_inv - 2.0 * lam * kk * vc_inv
    border = -2.0 * kk * vc_inv @ t_diff
    hess[:n_p, n_p] = border
    hess[n_p, :n_p] = border
    return hess


def newton_step(y: Array, vc_inv: Array, problem: Problem) -> tuple[Array, Array]:
    """One Newton-Raphson update.

    Returns the next iterate and the score evaluated at ``y`` (the point the
    step was taken from).

    Raises:
        SingularMatrixError: If the bordered Hessian at ``y`` is singular.
    """
    score = score_vector(y, vc_inv, problem)
    hess = bordered_hessian(y, vc_inv, problem)
    return y - solve(hess, score), score


def solve_boundary(problem: Problem) -> Solution:
    """Search a point on the confidence region bound described by ``problem``.

    The returned solution has ``on_boundary=None``; whether the point truly
    satisfies the constraint is decided by the verifier.

    Raises:
        InvalidInputError: In debug mode, if the covariance is not symmetric
            positive definite.
        SingularMatrixError: If the covariance or the bordered Hessian at
            some iterate cannot be inverted.

    Warns:
        NonConvergenceWarning: If ``max_iterations`` is reached before the
            summed score drops below ``tolerance``. The last iterate is
            still returned, flagged ``converged=False``.
    """
    debug = is_debug_enabled()
    if debug:
        assert_covariance(problem.covariance, name="covariance")

    vc_inv = invert(problem.covariance)
    y = problem.initial_guess.copy()
    hist: list[Array] = [y.copy()] if debug else []
    nit = 0
    score_sum = float("inf")
    converged = False

    while nit < problem.max_iterations:
        y, score = newton_step(y, vc_inv, problem)
        nit += 1
        score_sum = abs(float(np.sum(score)))
        if debug:
            hist.append(y.copy())
        logger.debug("iteration %d: |sum(score)| = %.3e", nit, score_sum)
        if score_sum < problem.tolerance:
            converged = True
            break

    if not converged:
        message = (
            f"The Newton-Raphson search did not converge within {nit} iterations "
            f"(|sum(score)| = {score_sum:.3e}, tolerance {problem.tolerance:.1e})."
        )
        logger.warning(message)
        warnings.warn(message, NonConvergenceWarning, stacklevel=2)
    else:
        logger.debug("converged after %d iterations", nit)

    return Solution(
        point=y,
        converged=converged,
        iterations_used=nit,
        max_iterations=problem.max_iterations,
        tolerance=problem.tolerance,
        score_sum=score_sum,
        history=hist,
    )


__all__ = ["bordered_hessian", "newton_step", "score_vector", "solve_boundary"]
