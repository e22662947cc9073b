"""
Shape reduction for two-dimensional results.

A (k x k) result computed with plain array algebra may really be a
vector (one axis of extent 1) or a scalar (both axes of extent 1).
These helpers detect those cases so that callers can pick a formula
that is well defined for the reduced rank.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from alximo.core.validation import check_2d


ShapeKind = Literal['scalar', 'vector', 'matrix']


@dataclass(frozen=True)
class ReducedShape:
    """
    Outcome of reduce_shape().

    Attributes
    ----------
    kind : {'scalar', 'vector', 'matrix'}
        Rank the input can be represented with without loss.
    values : ndarray
        0-D for 'scalar', 1-D for 'vector', the untouched 2-D input
        for 'matrix'.
    axis : int or None
        The axis that was collapsed for 'vector', None otherwise.
    """
    kind: ShapeKind
    values: NDArray[np.floating[Any]]
    axis: int | None = None


def squeeze(a: NDArray) -> NDArray | None:
    """
    Drop one axis of extent 1 from a 2-D array.

    Axis 0 is collapsed when it has extent 1, otherwise axis 1.
    Returns None when neither axis has extent 1.
    """
    check_2d(a, "a")
    if a.shape[0] == 1:
        return a[0, :]
    if a.shape[1] == 1:
        return a[:, 0]
    return None


def squeeze_both(a: NDArray) -> NDArray | None:
    """Reduce a (1, 1) array to 0-D. Returns None for any other shape."""
    check_2d(a, "a")
    if a.shape == (1, 1):
        return a.reshape(())
    return None


def reduce_shape(a: NDArray) -> ReducedShape:
    """
    Classify a 2-D array as scalar, vector or matrix.

    Scalar reduction is tried first, then vector; arrays with no
    axis of extent 1 are returned unchanged as 'matrix'.

    Raises
    ------
    DimensionError
        If `a` is not 2-D.
    """
    scalar = squeeze_both(a)
    if scalar is not None:
        return ReducedShape(kind='scalar', values=scalar)

    vector = squeeze(a)
    if vector is not None:
        axis = 0 if a.shape[0] == 1 else 1
        return ReducedShape(kind='vector', values=vector, axis=axis)

    return ReducedShape(kind='matrix', values=a)
