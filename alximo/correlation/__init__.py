"""
Correlation module.

Pairwise linear association statistics over 1D and 2D numeric arrays.

Public API:
    pearsonr(x, y)   - Pearson r and its Beta-distribution p-value
    cov(m, y)        - Covariance matrix (rowvar, bias, ddof)
    corrcoef(m, y)   - Correlation coefficient matrix from cov()
"""

from alximo.correlation._common import DdofConfig, VALID_ALTERNATIVES
from alximo.correlation.design import CorrelationDesign
from alximo.correlation.solution import CovarianceSolution, PearsonSolution
from alximo.correlation.solvers import pearsonr, cov, corrcoef

__all__ = [
    "pearsonr",
    "cov",
    "corrcoef",
    "CorrelationDesign",
    "CovarianceSolution",
    "PearsonSolution",
    "DdofConfig",
    "VALID_ALTERNATIVES",
]
