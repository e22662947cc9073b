"""
alximo: pairwise linear association statistics for Python.

Pearson correlation with significance testing, covariance matrices and
correlation coefficient matrices over 1D and 2D numpy arrays.

Submodules:
    correlation: pearsonr, cov, corrcoef
    core: result envelope, exceptions, validation, shape reduction
"""

__version__ = "0.1.0"

from alximo import correlation
from alximo.correlation import pearsonr, cov, corrcoef

__all__ = [
    "__version__",
    "correlation",
    "pearsonr",
    "cov",
    "corrcoef",
]
