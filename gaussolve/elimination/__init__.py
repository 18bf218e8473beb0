"""
Gaussian elimination.

Reduces an augmented system [A | b] to row-echelon form with partial
pivoting, reporting the determinant, the row swaps, and the LU factors
as byproducts, or a structured failure for singular input.

Public API:
    eliminate(matrix, tolerance=None, ...) -> EliminationSolution

Example:
    >>> from gaussolve.elimination import eliminate
    >>> result = eliminate([[1, 1, 2], [1, -1, 0]])
    >>> result.succeeded, result.determinant
    (True, -2.0)
"""

from gaussolve.elimination.design import AugmentedSystem
from gaussolve.elimination.solution import (
    EliminationSolution,
    EliminationParams,
    EliminationFailure,
    FailureKind,
    PivotRecord,
)
from gaussolve.elimination.solvers import eliminate

__all__ = [
    "eliminate",
    "AugmentedSystem",
    "EliminationSolution",
    "EliminationParams",
    "EliminationFailure",
    "FailureKind",
    "PivotRecord",
]
