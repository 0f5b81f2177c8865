"""Tests for the two-sample Hotelling T² estimates."""

import numpy as np
import pytest
from scipy import stats

from mcrbound.errors import InvalidInputError, SingularMatrixError
from mcrbound.hotelling import HotellingParameters, get_t2_two


@pytest.fixture
def samples(rng):
    reference = np.array([36.0, 59.5, 80.0, 94.5]) + 2.0 * rng.standard_normal((12, 4))
    test = np.array([33.0, 56.0, 77.5, 93.0]) + 2.5 * rng.standard_normal((12, 4))
    return reference, test


def test_parameters_match_textbook_formulas(samples):
    m1, m2 = samples
    res = get_t2_two(m1, m2, signif=0.05)

    assert isinstance(res, HotellingParameters)
    assert res.df1 == 4
    assert res.df2 == 12 + 12 - 4 - 1
    assert res.k == pytest.approx(6.0)
    assert res.K == pytest.approx(6.0 * 19 / (22 * 4))
    assert np.allclose(res.mean_diff, m1.mean(axis=0) - m2.mean(axis=0))

    s_pool = (11 * np.cov(m1, rowvar=False) + 11 * np.cov(m2, rowvar=False)) / 22
    assert np.allclose(res.s_pool, s_pool)
    assert np.allclose(res.s_pool, res.s_pool.T)

    dm2 = res.mean_diff @ np.linalg.solve(s_pool, res.mean_diff)
    assert res.dm == pytest.approx(np.sqrt(dm2))
    assert res.t2 == pytest.approx(6.0 * dm2)
    assert res.f_stat == pytest.approx(res.K * dm2)


def test_critical_value_and_p_value(samples):
    res = get_t2_two(*samples, signif=0.05)
    assert res.alpha == 0.05
    assert res.f_crit == pytest.approx(2.895, abs=1e-3)
    assert res.p_value == pytest.approx(stats.f.sf(res.f_stat, 4, 19))
    assert 0.0 <= res.p_value <= 1.0


def test_group_statistics_are_kept(samples):
    m1, m2 = samples
    res = get_t2_two(m1, m2)
    assert np.allclose(res.mean_1, m1.mean(axis=0))
    assert np.allclose(res.mean_2, m2.mean(axis=0))
    assert res.cov_1.shape == (4, 4)
    assert res.cov_2.shape == (4, 4)


def test_single_time_point():
    m1 = np.array([[1.0], [2.0], [3.0], [4.0]])
    m2 = np.array([[2.0], [4.0], [6.0]])
    res = get_t2_two(m1, m2)
    assert res.df1 == 1
    assert res.s_pool.shape == (1, 1)
    assert res.mean_diff == pytest.approx([2.5 - 4.0])


@pytest.mark.parametrize(
    "m1, m2, signif, match",
    [
        (np.ones(5), np.ones((5, 1)), 0.05, "m1"),
        (np.ones((5, 2)), np.ones((1, 2)), 0.05, "m2"),
        (np.ones((5, 2)), np.ones((5, 3)), 0.05, "columns"),
        (np.ones((5, 2)), np.ones((5, 2)), 0.0, "signif"),
        (np.ones((5, 2)), np.ones((5, 2)), 1.0, "signif"),
        (np.ones((2, 4)), np.ones((2, 4)), 0.05, "df2"),
        (np.full((3, 2), np.nan), np.ones((3, 2)), 0.05, "NaN"),
    ],
)
def test_invalid_samples(m1, m2, signif, match):
    with pytest.raises(InvalidInputError, match=match):
        get_t2_two(m1, m2, signif=signif)


def test_collinear_columns_raise_singular(rng):
    base = rng.standard_normal((10, 2))
    m1 = np.column_stack([base, base[:, 0]])
    m2 = m1 + 1.0
    with pytest.raises(SingularMatrixError):
        get_t2_two(m1, m2)
