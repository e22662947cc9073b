"""
Solver dispatch for correlation and covariance.

Provides pearsonr(), cov() and corrcoef().
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from alximo.core.exceptions import ValidationError
from alximo.correlation._common import Alternative
from alximo.correlation.design import CorrelationDesign
from alximo.correlation.solution import CovarianceSolution, PearsonSolution
from alximo.correlation.backends.cpu import CPUCorrelationBackend


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: str = 'cpu'):
    """Select backend. Only the CPU reference backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUCorrelationBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu' or 'auto'."
    )


def pearsonr(
    x: ArrayLike | CorrelationDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative = "two-sided",
    backend: BackendChoice = 'cpu',
) -> PearsonSolution:
    """
    Pearson correlation coefficient and its significance.

    Parameters
    ----------
    x, y : array-like
        1D samples of equal length, at least 3 observations.
        x may instead be a 'pearson' CorrelationDesign, with y omitted.
    alternative : str
        "two-sided" (default), "less" or "greater".
    backend : str
        'cpu' (default) or 'auto'.

    Returns
    -------
    PearsonSolution
        Unpacks as (r, p_value).

    Raises
    ------
    DimensionError
        If x and y differ in length or are not 1D.
    ValidationError
        For an unknown alternative, fewer than 3 observations,
        or non-finite data.
    ZeroVarianceError
        If x or y is constant.
    """
    if isinstance(x, CorrelationDesign):
        design = x
        if design.kind != 'pearson':
            raise ValidationError(
                f"pearsonr() needs a 'pearson' design, got {design.kind!r}"
            )
    else:
        if y is None:
            raise ValidationError("pearsonr() requires both x and y")
        design = CorrelationDesign.for_pearson(x, y, alternative=alternative)

    be = _get_backend(backend)
    result = be.solve(design)
    return PearsonSolution(_result=result, _design=design)


def cov(
    m: ArrayLike | CorrelationDesign,
    y: ArrayLike | None = None,
    *,
    rowvar: bool = True,
    bias: bool = False,
    ddof: int | None = None,
    backend: BackendChoice = 'cpu',
) -> CovarianceSolution:
    """
    Covariance matrix.

    Parameters
    ----------
    m : array-like or CorrelationDesign
        1D or 2D data. Rows are variables when rowvar is True.
    y : array-like, optional
        Extra variables with the same number of observations as m.
    rowvar : bool
        If False, columns are variables and rows are observations.
    bias : bool
        Normalize by N (population) instead of N - 1.
    ddof : int, optional
        Normalize by N - ddof. Overrides bias.
    backend : str
        'cpu' (default) or 'auto'.

    Returns
    -------
    CovarianceSolution with covariance_matrix populated.

    Raises
    ------
    DimensionError
        If m and y disagree on the number of observations.
    DegreesOfFreedomError
        If N - ddof <= 0.
    """
    if isinstance(m, CorrelationDesign):
        design = m
        if design.kind not in ('covariance', 'corrcoef'):
            raise ValidationError(
                f"cov() needs a 'covariance' design, got {design.kind!r}"
            )
    else:
        design = CorrelationDesign.for_covariance(
            m, y, rowvar=rowvar, bias=bias, ddof=ddof,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return CovarianceSolution(_result=result, _design=design)


def corrcoef(
    m: ArrayLike | CorrelationDesign,
    y: ArrayLike | None = None,
    *,
    rowvar: bool = True,
    bias: bool = False,
    ddof: int | None = None,
    backend: BackendChoice = 'cpu',
) -> CovarianceSolution:
    """
    Correlation coefficient matrix, derived from cov().

    Takes the same arguments and raises the same errors as cov(), and
    ZeroVarianceError when any of two or more variables is constant.
    The result always holds a 2D correlation_matrix, including for a
    single variable (a 1x1 matrix [[1.0]], even when it is constant).
    """
    if isinstance(m, CorrelationDesign):
        design = m
        if design.kind != 'corrcoef':
            raise ValidationError(
                f"corrcoef() needs a 'corrcoef' design, got {design.kind!r}"
            )
    else:
        design = CorrelationDesign.for_covariance(
            m, y, rowvar=rowvar, bias=bias, ddof=ddof, normalize=True,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return CovarianceSolution(_result=result, _design=design)
