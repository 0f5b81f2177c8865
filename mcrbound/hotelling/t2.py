"""Hotelling's two-sample T² statistic for small samples.

The boundary solver and verifier consume the scaling factor ``K``, the
degrees of freedom, the critical F value, the mean difference and the pooled
covariance of two groups of profiles. :func:`get_t2_two` estimates that
bundle from two data matrices (rows are units, e.g. tablets; columns are
time points or model parameters).

References:
    - Hotelling, H. (1931): The generalization of Student's ratio.
    - Tsong, Y. et al. (1996): Statistical assessment of mean differences
      between two dissolution data sets. Drug Inf J 30, 1105-1112.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from scipy import stats

from ..errors import InvalidInputError
from ..linalg import invert, quadratic_form
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class HotellingParameters:
    """Estimates of Hotelling's two-sample T² handed to the boundary search.

    Attributes:
        K: Scaling factor of the F-distributed statistic.
        df1: Numerator degrees of freedom (number of time points).
        df2: Denominator degrees of freedom.
        f_crit: Critical F value at significance ``alpha``.
        mean_diff: Difference of the group means, shape (df1,).
        s_pool: Pooled variance-covariance matrix, shape (df1, df1).
        alpha: Significance level used for ``f_crit``.
        k: Sample-size factor ``n1 * n2 / (n1 + n2)``.
        dm: Mahalanobis distance of ``mean_diff``.
        t2: Hotelling's T² statistic.
        f_stat: Observed F statistic.
        p_value: Upper-tail probability of ``f_stat``.
        mean_1, mean_2: Group means.
        cov_1, cov_2: Group variance-covariance matrices.
    """

    K: float
    df1: int
    df2: int
    f_crit: float
    mean_diff: np.ndarray
    s_pool: np.ndarray
    alpha: float = 0.05
    k: Optional[float] = None
    dm: Optional[float] = None
    t2: Optional[float] = None
    f_stat: Optional[float] = None
    p_value: Optional[float] = None
    mean_1: Optional[np.ndarray] = field(default=None, repr=False)
    mean_2: Optional[np.ndarray] = field(default=None, repr=False)
    cov_1: Optional[np.ndarray] = field(default=None, repr=False)
    cov_2: Optional[np.ndarray] = field(default=None, repr=False)


def _as_sample(name: str, data) -> np.ndarray:
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 2:
        raise InvalidInputError(f"{name} must be a 2-D array, got shape {arr.shape}")
    if arr.shape[0] < 2:
        raise InvalidInputError(f"{name} must have at least two rows, got {arr.shape[0]}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must not contain NaN or infinite values")
    return arr


def get_t2_two(m1, m2, signif: float = 0.05) -> HotellingParameters:
    """Estimate Hotelling's two-sample T² statistic.

    Args:
        m1: Data of the first group, shape (n1, p).
        m2: Data of the second group, shape (n2, p).
        signif: Significance level, in (0, 1).

    Returns:
        HotellingParameters with ``mean_diff = mean(m1) - mean(m2)``.

    Raises:
        InvalidInputError: If the samples are malformed or too small for
            ``p`` columns.
        SingularMatrixError: If the pooled covariance cannot be inverted.
    """
    m1 = _as_sample("m1", m1)
    m2 = _as_sample("m2", m2)
    if m1.shape[1] != m2.shape[1]:
        raise InvalidInputError(
            f"m1 and m2 must have the same number of columns, got {m1.shape[1]} and {m2.shape[1]}"
        )
    if not (0.0 < float(signif) < 1.0):
        raise InvalidInputError(f"signif must lie in (0, 1), got {signif}")

    n1, n_p = m1.shape
    n2 = m2.shape[0]
    df2 = n1 + n2 - n_p - 1
    if df2 < 1:
        raise InvalidInputError(
            f"too few observations ({n1} + {n2}) for {n_p} columns: df2 = {df2}"
        )

    mean_1 = m1.mean(axis=0)
    mean_2 = m2.mean(axis=0)
    mean_diff = mean_1 - mean_2
    cov_1 = np.atleast_2d(np.cov(m1, rowvar=False))
    cov_2 = np.atleast_2d(np.cov(m2, rowvar=False))
    s_pool = ((n1 - 1) * cov_1 + (n2 - 1) * cov_2) / (n1 + n2 - 2)

    k = n1 * n2 / (n1 + n2)
    kk = k * df2 / ((n1 + n2 - 2) * n_p)
    dm2 = quadratic_form(mean_diff, invert(s_pool))
    f_stat = kk * dm2
    f_crit = float(stats.f.ppf(1.0 - signif, n_p, df2))
    p_value = float(stats.f.sf(f_stat, n_p, df2))

    logger.debug(
        "T2 two-sample: n1=%d n2=%d p=%d K=%.6g F=%.6g F.crit=%.6g",
        n1, n2, n_p, kk, f_stat, f_crit,
    )

    return HotellingParameters(
        K=float(kk),
        df1=int(n_p),
        df2=int(df2),
        f_crit=f_crit,
        mean_diff=mean_diff,
        s_pool=s_pool,
        alpha=float(signif),
        k=float(k),
        dm=float(np.sqrt(dm2)),
        t2=float(k * dm2),
        f_stat=float(f_stat),
        p_value=p_value,
        mean_1=mean_1,
        mean_2=mean_2,
        cov_1=cov_1,
        cov_2=cov_2,
    )


__all__ = ["HotellingParameters", "get_t2_two"]
