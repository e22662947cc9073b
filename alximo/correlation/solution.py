"""
Correlation solution types.

PearsonSolution wraps Result[PearsonParams] and provides R's print.htest
format. CovarianceSolution wraps Result[CovarianceParams].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from alximo.core.result import Result
from alximo.correlation._common import CovarianceParams, PearsonParams

if TYPE_CHECKING:
    from alximo.correlation.design import CorrelationDesign


@dataclass
class PearsonSolution:
    """
    User-facing Pearson correlation result.

    Unpacks like a tuple, so both styles work:

        >>> r, p = pearsonr(x, y)
        >>> res = pearsonr(x, y); res.statistic, res.p_value
    """
    _result: Result[PearsonParams]
    _design: 'CorrelationDesign | None'

    @property
    def statistic(self) -> float:
        """Pearson correlation coefficient r."""
        return self._result.params.statistic

    @property
    def p_value(self) -> float:
        """p-value of r under the chosen alternative."""
        return self._result.params.p_value

    @property
    def parameter(self) -> dict[str, float]:
        """Beta null distribution shape parameters."""
        return self._result.params.parameter

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def n(self) -> int:
        """Number of paired observations."""
        return self._result.params.n

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[float]:
        yield self.statistic
        yield self.p_value

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as R's print.htest output for cor.test().

        Produces output like:
            Pearson's product-moment correlation

        data:  x and y
        r = 0.9, n = 6, p-value = 0.01449
        alternative hypothesis: true correlation is not equal to 0
        sample estimates:
                   cor
                   0.9
        """
        p = self._result.params
        data_name = self._design.data_name if self._design is not None else "x and y"
        lines = []

        lines.append("\tPearson's product-moment correlation")
        lines.append("")
        lines.append(f"data:  {data_name}")
        lines.append(
            f"r = {p.statistic:.5g}, n = {p.n}, p-value = {_format_pvalue(p.p_value)}"
        )

        if p.alternative == "two-sided":
            lines.append("alternative hypothesis: true correlation is not equal to 0")
        elif p.alternative == "less":
            lines.append("alternative hypothesis: true correlation is less than 0")
        elif p.alternative == "greater":
            lines.append("alternative hypothesis: true correlation is greater than 0")

        lines.append("sample estimates:")
        lines.append(f"{'cor':>14s}")
        lines.append(f"{p.statistic:14.7g}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"PearsonSolution(statistic={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, alternative={p.alternative!r})"
        )


@dataclass
class CovarianceSolution:
    """
    User-facing covariance / correlation matrix result.

    Both matrices are always 2D with one row and one column per variable.
    """
    _result: Result[CovarianceParams]
    _design: 'CorrelationDesign'

    @property
    def covariance_matrix(self) -> NDArray[np.floating[Any]]:
        """Covariance matrix, shape (k, k)."""
        return self._result.params.covariance_matrix

    @property
    def correlation_matrix(self) -> NDArray[np.floating[Any]] | None:
        """Correlation coefficients in [-1, 1], shape (k, k). None for cov()."""
        return self._result.params.correlation_matrix

    @property
    def ddof(self) -> int:
        return self._result.params.ddof

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_variables(self) -> int:
        return self._result.params.n_variables

    @property
    def shape_kind(self) -> str | None:
        """Normalization path used by corrcoef(): 'scalar', 'vector' or 'matrix'."""
        return self._result.params.shape_kind

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        p = self._result.params
        computed = ["cov"]
        if p.correlation_matrix is not None:
            computed.append("cor")
        return (
            f"CovarianceSolution(n_observations={p.n_observations}, "
            f"n_variables={p.n_variables}, ddof={p.ddof}, "
            f"computed=[{', '.join(computed)}])"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
