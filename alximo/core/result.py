"""
Generic result container for all alximo computations.

Every backend wraps its parameter payload in a Result so that timing,
diagnostics and the producing backend travel together with the numbers.

Design decisions:
    - Generic over parameter payload P
    - info dict for free-form metadata (computation kind, ddof, ...)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficient, matrices, ...)
        info: Structured metadata about the computation
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PearsonParams(statistic=0.98, p_value=0.001, ...),
        ...     info={'kind': 'pearson'},
        ...     timing={'total_seconds': 0.0002, 'pearson': 0.0001},
        ...     backend_name='cpu_correlation'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
