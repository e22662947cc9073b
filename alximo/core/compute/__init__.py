"""
Shared compute infrastructure for alximo.

IMPORTANT: This is NOT where correlation backends live. Those go in
correlation/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    shape: Scalar / vector / matrix reduction of 2-D results
"""

from alximo.core.compute.timing import Timer
from alximo.core.compute.shape import (
    ReducedShape,
    reduce_shape,
    squeeze,
    squeeze_both,
)

__all__ = [
    # Timing
    "Timer",
    # Shape reduction
    "ReducedShape",
    "reduce_shape",
    "squeeze",
    "squeeze_both",
]
