"""
gaussolve: dense linear systems by Gaussian elimination.

Reduces an augmented matrix [A | b] to row-echelon form with partial
pivoting and a norm-scaled pivot tolerance, reports the determinant as a
byproduct, and recovers x by back-substitution. Singular systems come
back as structured failures, never as NaN.

Submodules:
    elimination: eliminate(): the elimination engine
    substitution: solve(): back-substitution
    core: exceptions, validation, display, compute utilities
"""

__version__ = "0.1.0"

from gaussolve import elimination
from gaussolve import substitution
from gaussolve.elimination import (
    eliminate,
    AugmentedSystem,
    EliminationSolution,
    FailureKind,
    PivotRecord,
)
from gaussolve.substitution import solve, SolutionVector
from gaussolve.solvers import solve_system, determinant
from gaussolve.core.display import format_matrix, format_vector, print_matrix
from gaussolve.core.exceptions import (
    GaussSolveError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NearSingularMatrixError,
    InvalidPreconditionError,
)

__all__ = [
    "__version__",
    "elimination",
    "substitution",
    # Pipeline
    "eliminate",
    "solve",
    "solve_system",
    "determinant",
    # Types
    "AugmentedSystem",
    "EliminationSolution",
    "FailureKind",
    "PivotRecord",
    "SolutionVector",
    # Display
    "format_matrix",
    "format_vector",
    "print_matrix",
    # Exceptions
    "GaussSolveError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NearSingularMatrixError",
    "InvalidPreconditionError",
]
