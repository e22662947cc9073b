"""
Pearson correlation coefficient with a Beta-distribution significance test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from alximo.core.exceptions import ValidationError, ZeroVarianceError
from alximo.correlation._common import PearsonParams

if TYPE_CHECKING:
    from alximo.correlation.design import CorrelationDesign


def pearson(design: CorrelationDesign) -> PearsonParams:
    """Pearson r of design.x and design.y, and its p-value."""
    x = design.x
    y = design.y

    n = float(len(x))
    sum_x = np.sum(x)
    sum_y = np.sum(y)

    ss_x = n * np.sum(x * x) - sum_x ** 2
    ss_y = n * np.sum(y * y) - sum_y ** 2
    if ss_x == 0.0 or ss_y == 0.0:
        constant = tuple(i for i, ss in enumerate((ss_x, ss_y)) if ss == 0.0)
        names = " and ".join(("x", "y")[i] for i in constant)
        raise ZeroVarianceError(
            f"pearsonr: {names} constant, correlation is undefined",
            variables=constant,
        )

    numerator = n * np.sum(x * y) - sum_x * sum_y
    denominator = np.sqrt(ss_x * ss_y)

    # round-off can push |r| just past 1 for perfectly linear data
    r = float(min(1.0, max(-1.0, numerator / denominator)))
    p_value = pearson_significance(r, n, design.alternative)

    shape = n / 2.0 - 1.0

    return PearsonParams(
        statistic=r,
        p_value=p_value,
        parameter={"a": shape, "b": shape},
        alternative=design.alternative,
        n=int(n),
    )


def pearson_significance(r: float, n: float, alternative: str) -> float:
    """
    p-value of r under H0: no linear association.

    Evaluates r against a standard Beta(n/2 - 1, n/2 - 1) distribution:
    two-sided is 2 * sf(|r|), less is cdf(r), greater is sf(r).
    """
    shape = n / 2.0 - 1.0
    if shape <= 0:
        raise ValidationError(
            f"Beta shape parameter n/2 - 1 must be positive, got {shape:g} for n={n:g}"
        )
    dist = sp_stats.beta(shape, shape)

    if alternative == "two-sided":
        p = 2.0 * dist.sf(abs(r))
    elif alternative == "less":
        p = dist.cdf(r)
    elif alternative == "greater":
        p = dist.sf(r)
    else:
        raise ValidationError(
            f"alternative must be 'two-sided', 'less' or 'greater', got {alternative!r}"
        )
    return float(p)
