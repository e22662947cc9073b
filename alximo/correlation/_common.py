"""
Common types for correlation and covariance.

Defines the alternative-hypothesis choices, degrees-of-freedom resolution,
and the parameter payloads carried in Result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from alximo.core.exceptions import ValidationError


Alternative = Literal["two-sided", "less", "greater"]
VALID_ALTERNATIVES = ("two-sided", "less", "greater")


@dataclass(frozen=True)
class DdofConfig:
    """
    Delta degrees of freedom request.

    An explicit ddof always wins over the bias flag. Without one,
    bias=True selects the population estimator (ddof=0) and bias=False
    the sample estimator (ddof=1).
    """
    bias: bool = False
    ddof: int | None = None

    def resolve(self) -> int:
        if self.ddof is not None:
            try:
                as_int = int(self.ddof)
            except (TypeError, ValueError, OverflowError) as e:
                raise ValidationError(
                    f"ddof must be an integer, got {self.ddof!r}"
                ) from e
            if isinstance(self.ddof, bool) or as_int != self.ddof:
                raise ValidationError(f"ddof must be an integer, got {self.ddof!r}")
            if self.ddof < 0:
                raise ValidationError(f"ddof must be non-negative, got {self.ddof}")
            return as_int
        return 0 if self.bias else 1


@dataclass(frozen=True)
class PearsonParams:
    """
    Parameter payload for the two-sample Pearson estimator.

    Attributes
    ----------
    statistic : float
        Pearson correlation coefficient r, clamped to [-1, 1].
    p_value : float
        Significance of r under the chosen alternative.
    parameter : dict
        Shape parameters of the Beta null distribution, {"a": ..., "b": ...}.
    alternative : str
        "two-sided", "less" or "greater".
    n : int
        Number of paired observations.
    """
    statistic: float
    p_value: float
    parameter: dict[str, float]
    alternative: str
    n: int


@dataclass(frozen=True)
class CovarianceParams:
    """
    Parameter payload for covariance / correlation matrices.

    correlation_matrix is None unless the correlation normalization ran.
    shape_kind records which normalization path was used.
    """
    covariance_matrix: NDArray[np.floating[Any]]
    ddof: int
    n_observations: int
    n_variables: int
    correlation_matrix: NDArray[np.floating[Any]] | None = None
    shape_kind: str | None = None
