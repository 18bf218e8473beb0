"""
Core infrastructure for gaussolve.

Shared abstractions used by the elimination and substitution subpackages.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    display: Matrix / vector rendering
    compute: Device detection, timing, precision, tolerances
"""

from gaussolve.core.protocols import Backend
from gaussolve.core.result import Result
from gaussolve.core.exceptions import (
    GaussSolveError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NearSingularMatrixError,
    InvalidPreconditionError,
)
from gaussolve.core.display import format_matrix, format_vector, print_matrix

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "GaussSolveError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NearSingularMatrixError",
    "InvalidPreconditionError",
    # Display
    "format_matrix",
    "format_vector",
    "print_matrix",
]
