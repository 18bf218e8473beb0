"""
Generic result container for all gaussolve computations.

The Result class provides a standardized envelope that elimination and
substitution results use. This enables shared tooling for timing and
diagnostics while each subpackage defines its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (pivoting, threshold, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-system computations.

    Type Parameters:
        P: The payload type (success params or a failure record)

    Attributes:
        params: Payload produced by the backend
        info: Structured metadata (method, pivoting, tolerance, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EliminationParams(...),
        ...     info={'method': 'gauss', 'pivoting': 'partial', 'n_swaps': 2},
        ...     timing={'total_seconds': 0.001, 'elimination': 0.0008},
        ...     backend_name='cpu_gauss_partial'
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
