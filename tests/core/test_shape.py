"""
Tests for scalar / vector / matrix reduction of 2D arrays.
"""

import numpy as np
import pytest

from alximo.core.compute.shape import reduce_shape, squeeze, squeeze_both
from alximo.core.exceptions import DimensionError


class TestSqueeze:

    def test_row_collapses_axis_0(self):
        out = squeeze(np.array([[1.0, 2.0, 3.0]]))
        assert out.shape == (3,)
        np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])

    def test_column_collapses_axis_1(self):
        out = squeeze(np.array([[1.0], [2.0]]))
        assert out.shape == (2,)

    def test_one_by_one_prefers_axis_0(self):
        out = squeeze(np.array([[7.0]]))
        assert out.shape == (1,)

    def test_no_unit_axis(self):
        assert squeeze(np.eye(2)) is None

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            squeeze(np.zeros(3))


class TestSqueezeBoth:

    def test_one_by_one(self):
        out = squeeze_both(np.array([[7.0]]))
        assert out.shape == ()
        assert float(out) == 7.0

    def test_vector_not_reduced(self):
        assert squeeze_both(np.array([[1.0, 2.0]])) is None


class TestReduceShape:

    def test_scalar(self):
        reduced = reduce_shape(np.array([[4.0]]))
        assert reduced.kind == 'scalar'
        assert reduced.values.ndim == 0
        assert reduced.axis is None

    def test_row_vector(self):
        reduced = reduce_shape(np.array([[1.0, 2.0, 3.0]]))
        assert reduced.kind == 'vector'
        assert reduced.axis == 0
        assert reduced.values.shape == (3,)

    def test_column_vector(self):
        reduced = reduce_shape(np.array([[1.0], [2.0]]))
        assert reduced.kind == 'vector'
        assert reduced.axis == 1

    def test_matrix_untouched(self):
        a = np.arange(9.0).reshape(3, 3)
        reduced = reduce_shape(a)
        assert reduced.kind == 'matrix'
        assert reduced.values is a
