"""
Dense linear-algebra helpers for the confidence-region computations.

The boundary search only ever deals with small, dense covariance matrices
(one row per time point or model parameter), so everything here is plain
NumPy. Unlike a least-squares fallback, an ill-conditioned matrix is reported
as :class:`~mcrbound.errors.SingularMatrixError` rather than regularized:
a ridge term would silently move the confidence region.
"""

from __future__ import annotations

import numpy as np

from ..errors import InvalidInputError, SingularMatrixError

Array = np.ndarray

# Matrices whose 2-norm condition number exceeds this are treated as singular.
COND_LIMIT = 1e12


def symmetrize(matrix: Array) -> Array:
    """
    Return the symmetric part of ``matrix``.

    Quadratic forms only see the symmetric part of a matrix; dropping the
    antisymmetric round-off before evaluating ``x^T A x`` keeps the result
    stable for ill-conditioned inverses.
    """

    return 0.5 * (matrix + matrix.T)


def is_pos_def(mat: Array, tol: float = 1e-12) -> bool:
    """Check if a matrix is symmetric positive definite via eigenvalues."""
    mat = np.asarray(mat, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    if not np.allclose(mat, mat.T, rtol=1e-10, atol=1e-12):
        return False
    eigvals = np.linalg.eigvalsh(symmetrize(mat))
    return bool(np.all(eigvals > tol))


def condition_number(matrix: Array) -> float:
    """Return the 2-norm condition number, ``inf`` for singular input."""
    with np.errstate(divide="ignore", invalid="ignore"):
        cond = float(np.linalg.cond(matrix))
    if not np.isfinite(cond):
        return float("inf")
    return cond


def _check_square(matrix: Array) -> Array:
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidInputError(f"expected a square 2-D matrix, got shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise SingularMatrixError("matrix contains non-finite entries")
    return matrix


def _check_conditioning(matrix: Array, cond_limit: float) -> None:
    cond = condition_number(matrix)
    if cond > cond_limit:
        raise SingularMatrixError(
            f"matrix is numerically singular (condition number {cond:.3e} "
            f"exceeds {cond_limit:.1e})"
        )


def invert(matrix: Array, cond_limit: float = COND_LIMIT) -> Array:
    """
    Invert a square matrix, refusing numerically singular input.

    Raises:
        InvalidInputError: If ``matrix`` is not a square 2-D array.
        SingularMatrixError: If the matrix is singular, contains non-finite
            entries or its condition number exceeds ``cond_limit``.
    """

    matrix = _check_square(matrix)
    _check_conditioning(matrix, cond_limit)
    try:
        return np.linalg.inv(matrix)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(str(exc)) from exc


def solve(matrix: Array, rhs: Array, cond_limit: float = COND_LIMIT) -> Array:
    """
    Solve ``A x = b`` under the same conditioning contract as :func:`invert`.
    """

    matrix = _check_square(matrix)
    rhs = np.asarray(rhs, dtype=float)
    if rhs.shape[0] != matrix.shape[0]:
        raise InvalidInputError(
            f"rhs of length {rhs.shape[0]} does not match matrix shape {matrix.shape}"
        )
    _check_conditioning(matrix, cond_limit)
    try:
        return np.linalg.solve(matrix, rhs)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(str(exc)) from exc


def quadratic_form(vector: Array, matrix_inv: Array) -> float:
    """Return ``vector^T @ matrix_inv @ vector`` as a float."""
    vec = np.asarray(vector, dtype=float).reshape(-1)
    mat = np.asarray(matrix_inv, dtype=float)
    if mat.shape != (vec.size, vec.size):
        raise InvalidInputError(
            f"matrix shape {mat.shape} incompatible with vector of length {vec.size}"
        )
    return float(vec @ symmetrize(mat) @ vec)


__all__ = [
    "Array",
    "COND_LIMIT",
    "condition_number",
    "invert",
    "is_pos_def",
    "quadratic_form",
    "solve",
    "symmetrize",
]
