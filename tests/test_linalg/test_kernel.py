import numpy as np
import pytest

from mcrbound.errors import InvalidInputError, SingularMatrixError
from mcrbound.linalg import (
    condition_number,
    invert,
    is_pos_def,
    quadratic_form,
    solve,
    symmetrize,
)


def test_invert_matches_numpy(rng, make_spd):
    mat = make_spd(rng, 4)
    inv = invert(mat)
    assert np.allclose(inv @ mat, np.eye(4), atol=1e-10)


def test_invert_rejects_exactly_singular_matrix():
    mat = np.array([[1.0, 1.0], [1.0, 1.0]])
    with pytest.raises(SingularMatrixError):
        invert(mat)


def test_invert_rejects_near_singular_matrix():
    mat = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-14]])
    with pytest.raises(SingularMatrixError, match="condition number"):
        invert(mat)


def test_invert_accepts_ill_conditioned_but_invertible():
    mat = np.diag([1.0, 1e-8])
    inv = invert(mat)
    assert np.allclose(inv, np.diag([1.0, 1e8]))


def test_invert_rejects_non_finite_and_non_square():
    with pytest.raises(SingularMatrixError):
        invert(np.array([[np.nan, 0.0], [0.0, 1.0]]))
    with pytest.raises(InvalidInputError, match="square"):
        invert(np.ones((2, 3)))
    with pytest.raises(ValueError):
        invert(np.ones(3))


def test_singular_matrix_error_is_linalg_error():
    with pytest.raises(np.linalg.LinAlgError):
        invert(np.zeros((3, 3)))


def test_solve_matches_inverse(rng, make_spd):
    mat = make_spd(rng, 3)
    rhs = rng.standard_normal(3)
    assert np.allclose(solve(mat, rhs), invert(mat) @ rhs, atol=1e-10)


def test_solve_shape_mismatch():
    with pytest.raises(InvalidInputError, match="rhs"):
        solve(np.eye(3), np.ones(2))
    with pytest.raises(InvalidInputError, match="square"):
        solve(np.ones((3, 2)), np.ones(3))


def test_quadratic_form_simple():
    vec = np.array([1.0, 2.0])
    mat_inv = np.array([[2.0, 0.5], [0.5, 1.0]])
    # 2*1 + 2*0.5*1*2 + 1*4
    assert quadratic_form(vec, mat_inv) == pytest.approx(8.0)


def test_quadratic_form_ignores_antisymmetric_part():
    vec = np.array([1.0, -3.0])
    sym = np.array([[2.0, 0.3], [0.3, 1.0]])
    skew = np.array([[0.0, 5.0], [-5.0, 0.0]])
    assert quadratic_form(vec, sym + skew) == pytest.approx(quadratic_form(vec, sym))


def test_quadratic_form_shape_mismatch():
    with pytest.raises(InvalidInputError):
        quadratic_form(np.ones(3), np.eye(2))


def test_symmetrize_and_pos_def(rng, make_spd):
    mat = make_spd(rng, 3)
    assert np.allclose(symmetrize(mat), mat)
    assert is_pos_def(mat)
    assert not is_pos_def(-mat)
    assert not is_pos_def(np.array([[1.0, 2.0], [0.0, 1.0]]))
    assert not is_pos_def(np.ones((2, 3)))


def test_condition_number_of_singular_matrix_is_inf():
    assert condition_number(np.zeros((2, 2))) == float("inf")
    assert condition_number(np.eye(2)) == pytest.approx(1.0)
