"""
CorrelationDesign: tagged union for correlation inputs.

Uses factory classmethods per computation kind. The `kind` field identifies
which fields are populated. All validation happens at construction, so a
design that exists is always computable. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from alximo.core.exceptions import (
    DegreesOfFreedomError, DimensionError, ValidationError,
)
from alximo.core.validation import (
    check_1d, check_array, check_consistent_length, check_finite, check_max_ndim,
)
from alximo.correlation._common import DdofConfig, VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _to_variables(
    a: ArrayLike, rowvar: bool, name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert to a (variables x observations) float64 matrix.

    1D input is a single variable. With rowvar=False the input is
    transposed unless it is already a single row.
    """
    arr = check_array(a, name)
    check_max_ndim(arr, 2, name)
    check_finite(arr, name)

    arr = np.atleast_2d(arr)
    if not rowvar and arr.shape[0] != 1:
        arr = arr.T
    return arr


@dataclass(frozen=True)
class CorrelationDesign:
    """
    Design for correlation and covariance computations.

    kind is one of:
        'pearson'     two sample vectors, significance test
        'covariance'  covariance matrix of a variable set
        'corrcoef'    covariance followed by correlation normalization

    Do not construct directly; use factory classmethods.
    """
    kind: str

    # Pearson
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None
    _alternative: str = "two-sided"

    # Covariance / corrcoef: (variables x observations), y rows already appended
    _variables: NDArray[np.floating[Any]] | None = None
    _ddof: int = 1

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def variables(self) -> NDArray[np.floating[Any]] | None:
        """Combined variable matrix, one row per variable."""
        return self._variables

    @property
    def ddof(self) -> int:
        return self._ddof

    @property
    def n_observations(self) -> int:
        if self._variables is not None:
            return self._variables.shape[1]
        return len(self._x)

    @property
    def n_variables(self) -> int:
        if self._variables is not None:
            return self._variables.shape[0]
        return 2

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'kind': self.kind,
            'n_observations': self.n_observations,
            'n_variables': self.n_variables,
        }

    # --- Factories ---

    @classmethod
    def for_pearson(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: str = "two-sided",
    ) -> CorrelationDesign:
        """
        Build a design for pearsonr().

        Both inputs must be 1D, finite and of equal length. The Beta null
        distribution needs n/2 - 1 > 0, so at least 3 observations.
        """
        alternative = _validate_alternative(alternative)

        x_arr = check_array(x, "x")
        y_arr = check_array(y, "y")
        check_1d(x_arr, "x")
        check_1d(y_arr, "y")
        check_consistent_length(x_arr, y_arr, names=("x", "y"))
        check_finite(x_arr, "x")
        check_finite(y_arr, "y")

        n = len(x_arr)
        shape = n / 2.0 - 1.0
        if shape <= 0:
            raise ValidationError(
                f"pearsonr: Beta shape parameter n/2 - 1 must be positive, "
                f"got {shape:g} for n={n} (need at least 3 observations)"
            )

        return cls(
            kind='pearson',
            _x=x_arr,
            _y=y_arr,
            _alternative=alternative,
            _data_name="x and y",
        )

    @classmethod
    def for_covariance(
        cls,
        m: ArrayLike,
        y: ArrayLike | None = None,
        *,
        rowvar: bool = True,
        bias: bool = False,
        ddof: int | None = None,
        normalize: bool = False,
    ) -> CorrelationDesign:
        """
        Build a design for cov() or, with normalize=True, corrcoef().

        Parameters
        ----------
        m : array-like
            1D or 2D. Each row is a variable when rowvar is True,
            each column otherwise. 1D input is a single variable.
        y : array-like, optional
            Additional variables, oriented like m. Its variables are
            appended after m's and must share m's observation count.
        rowvar : bool
            Orientation of m and y.
        bias : bool
            Population (ddof=0) instead of sample (ddof=1) normalization.
        ddof : int, optional
            Overrides bias when given.
        normalize : bool
            Build a 'corrcoef' design instead of 'covariance'.
        """
        variables = _to_variables(m, rowvar, "m")
        data_name = "m"

        if y is not None:
            y_vars = _to_variables(y, rowvar, "y")
            if y_vars.shape[1] != variables.shape[1]:
                raise DimensionError(
                    f"m and y must have the same number of observations, "
                    f"got m={variables.shape[1]}, y={y_vars.shape[1]}"
                )
            variables = np.concatenate((variables, y_vars), axis=0)
            data_name = "m and y"

        if variables.shape[0] < 1:
            raise ValidationError("Need at least 1 variable, got 0")

        resolved = DdofConfig(bias=bias, ddof=ddof).resolve()
        n_obs = variables.shape[1]
        if n_obs - resolved <= 0:
            raise DegreesOfFreedomError(
                f"Degrees of freedom <= 0: {n_obs} observations with ddof={resolved}",
                n_observations=n_obs,
                ddof=resolved,
            )

        return cls(
            kind='corrcoef' if normalize else 'covariance',
            _variables=variables,
            _ddof=resolved,
            _data_name=data_name,
        )

    def __repr__(self) -> str:
        return (
            f"CorrelationDesign(kind={self.kind!r}, "
            f"n_observations={self.n_observations}, n_variables={self.n_variables})"
        )
