"""Consistency checks for covariance matrices entering the boundary search."""

from __future__ import annotations

import numpy as np

from ..errors import InvalidInputError
from ..linalg import is_pos_def


def is_symmetric(mat: np.ndarray, atol: float = 1e-10) -> bool:
    """
    Check whether a square matrix equals its transpose within ``atol``.
    """
    mat = np.asarray(mat, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    max_dev = np.abs(mat - mat.T).max(initial=0.0)
    return bool(np.isfinite(max_dev) and max_dev <= atol)


def assert_covariance(mat: np.ndarray, name: str = "covariance", atol: float = 1e-10) -> None:
    """
    Assert that ``mat`` is a valid variance-covariance matrix.

    Parameters
    ----------
    mat:
        Square matrix to check.
    name:
        Field name reported in the error message.
    atol:
        Absolute tolerance for the symmetry check.

    Raises
    ------
    InvalidInputError
        If the matrix is not symmetric or not positive definite.
    """
    if not is_symmetric(mat, atol=atol):
        raise InvalidInputError(f"{name} must be symmetric within {atol}")
    if not is_pos_def(mat):
        eigvals = np.linalg.eigvalsh(0.5 * (mat + mat.T))
        raise InvalidInputError(
            f"{name} must be symmetric positive definite; smallest eigenvalue {eigvals[0]:.3e}"
        )
