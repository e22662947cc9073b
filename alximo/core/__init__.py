"""
Core infrastructure for alximo.

Shared abstractions and utilities used by the correlation module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and shape reduction helpers
"""

from alximo.core.result import Result
from alximo.core.exceptions import (
    AlximoError,
    ValidationError,
    DimensionError,
    DegreesOfFreedomError,
    NumericalError,
    ZeroVarianceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "AlximoError",
    "ValidationError",
    "DimensionError",
    "DegreesOfFreedomError",
    "NumericalError",
    "ZeroVarianceError",
]
