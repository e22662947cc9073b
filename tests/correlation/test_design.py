"""
Tests for CorrelationDesign and DdofConfig.
"""

import numpy as np
import pytest

from alximo.core.exceptions import DimensionError, ValidationError
from alximo.correlation import CorrelationDesign, DdofConfig


class TestDdofConfig:

    def test_default_is_sample_estimator(self):
        assert DdofConfig().resolve() == 1

    def test_bias_is_population_estimator(self):
        assert DdofConfig(bias=True).resolve() == 0

    def test_explicit_ddof_wins(self):
        assert DdofConfig(bias=True, ddof=2).resolve() == 2
        assert DdofConfig(bias=False, ddof=0).resolve() == 0

    def test_numpy_integer_accepted(self):
        assert DdofConfig(ddof=np.int64(3)).resolve() == 3

    def test_bool_ddof_rejected(self):
        with pytest.raises(ValidationError):
            DdofConfig(ddof=True).resolve()

    @pytest.mark.parametrize("ddof", ["a", "3", [1], float("nan"), float("inf")])
    def test_non_integer_ddof_rejected(self, ddof):
        with pytest.raises(ValidationError, match="ddof must be an integer"):
            DdofConfig(ddof=ddof).resolve()


class TestPearsonDesign:

    def test_fields(self):
        design = CorrelationDesign.for_pearson([1, 2, 3], [3, 2, 1], alternative="less")
        assert design.kind == 'pearson'
        assert design.alternative == "less"
        assert design.x.dtype == np.float64
        assert design.n_observations == 3
        assert design.n_variables == 2
        assert design.data_name == "x and y"

    def test_frozen(self):
        design = CorrelationDesign.for_pearson([1, 2, 3], [3, 2, 1])
        with pytest.raises(AttributeError):
            design.kind = 'covariance'


class TestCovarianceDesign:

    def test_1d_is_one_variable(self):
        design = CorrelationDesign.for_covariance([1.0, 2.0, 3.0])
        assert design.variables.shape == (1, 3)
        assert design.kind == 'covariance'

    def test_normalize_kind(self):
        design = CorrelationDesign.for_covariance([1.0, 2.0, 3.0], normalize=True)
        assert design.kind == 'corrcoef'

    def test_rowvar_false(self):
        design = CorrelationDesign.for_covariance(np.zeros((5, 2)), rowvar=False)
        assert design.variables.shape == (2, 5)
        assert design.n_observations == 5
        assert design.n_variables == 2

    def test_y_appended(self):
        design = CorrelationDesign.for_covariance(np.zeros((2, 4)), np.ones(4))
        assert design.variables.shape == (3, 4)
        np.testing.assert_array_equal(design.variables[2], 1.0)
        assert design.data_name == "m and y"

    def test_y_mismatch(self):
        with pytest.raises(DimensionError, match="same number of observations"):
            CorrelationDesign.for_covariance(np.zeros((2, 4)), np.ones(5))

    def test_empty_variable_set(self):
        with pytest.raises(ValidationError, match="at least 1 variable"):
            CorrelationDesign.for_covariance(np.zeros((0, 4)))

    def test_resolved_ddof(self):
        assert CorrelationDesign.for_covariance([1.0, 2.0], bias=True).ddof == 0

    def test_metadata_and_repr(self):
        design = CorrelationDesign.for_covariance(np.zeros((3, 6)))
        assert design.metadata == {
            'kind': 'covariance', 'n_observations': 6, 'n_variables': 3,
        }
        assert repr(design) == (
            "CorrelationDesign(kind='covariance', n_observations=6, n_variables=3)"
        )
