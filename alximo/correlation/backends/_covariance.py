"""
Covariance matrices and their normalization to correlation coefficients.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from alximo.core.compute.shape import reduce_shape
from alximo.core.exceptions import ZeroVarianceError

if TYPE_CHECKING:
    from alximo.correlation.design import CorrelationDesign


def covariance(design: CorrelationDesign) -> NDArray[np.floating[Any]]:
    """
    Covariance matrix of design.variables, shape (k, k).

    Every element is centered on the single mean of the whole variable
    matrix, not on the mean of its own row.
    """
    X = design.variables
    fact = X.shape[1] - design.ddof

    X_c = X - X.mean()
    return (X_c @ X_c.T) * (1.0 / fact)


def normalize_covariance(
    c: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], str]:
    """
    Convert a covariance matrix to correlation coefficients.

    A 1x1 input is a single variable, correlated perfectly with itself.
    A row or column vector holds per-variable variances and expands to
    the (N, N) matrix v[i] / (s[i] * s[j]), s = sqrt(v).

    Returns
    -------
    cor : ndarray
        2D array with every entry in [-1, 1].
    kind : str
        Normalization path taken: 'scalar', 'vector' or 'matrix'.

    Raises
    ------
    ZeroVarianceError
        If any variable (outside the 1x1 case) has zero variance.
    """
    reduced = reduce_shape(c)

    if reduced.kind == 'scalar':
        return np.ones((1, 1)), reduced.kind

    if reduced.kind == 'vector':
        variances = reduced.values
    else:
        variances = np.diag(c)

    constant = tuple(int(i) for i in np.flatnonzero(variances == 0.0))
    if constant:
        raise ZeroVarianceError(
            f"zero variance in variable(s) {list(constant)}, correlation is undefined",
            variables=constant,
        )

    stddev = np.sqrt(variances)
    if reduced.kind == 'vector':
        cor = reduced.values / np.outer(stddev, stddev)
    else:
        cor = c / stddev[:, None]
        cor = cor / stddev[None, :]

    return np.clip(cor, -1.0, 1.0), reduced.kind
