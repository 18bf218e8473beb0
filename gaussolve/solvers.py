"""
One-call pipelines over elimination and back-substitution.

solve_system() and determinant() never touch the caller's arrays: they
build a fresh augmented matrix and hand it to eliminate().
"""

import numpy as np
from numpy.typing import ArrayLike

from gaussolve.core.validation import check_array, check_square
from gaussolve.elimination.design import AugmentedSystem
from gaussolve.elimination.solution import FailureKind
from gaussolve.elimination.solvers import eliminate, BackendChoice
from gaussolve.elimination.backends.cpu import Pivoting
from gaussolve.substitution.solvers import solve
from gaussolve.substitution.solution import SolutionVector


def solve_system(
    A: ArrayLike,
    b: ArrayLike,
    tolerance: float | None = None,
    *,
    pivoting: Pivoting = 'partial',
    backend: BackendChoice = 'auto',
) -> SolutionVector:
    """
    Solve Ax = b by Gaussian elimination and back-substitution.

    Args:
        A: Square coefficient matrix (N x N)
        b: Right-hand side (N,) or (N, 1)
        tolerance: Relative pivot tolerance; None for the dtype default
        pivoting: 'partial' or 'none'
        backend: Elimination backend ('auto', 'cpu', 'gpu')

    Returns:
        SolutionVector x

    Raises:
        DimensionError: If A is not square or b does not match
        SingularMatrixError: If a pivot is exactly zero
        NearSingularMatrixError: If a pivot is below the threshold

    Example:
        >>> x = solve_system([[8, 1, 6], [3, 5, 7], [4, 9, 2]], [1, 4, 2])
        >>> len(x)
        3
    """
    design = AugmentedSystem.from_arrays(A, b)
    elimination = eliminate(design, tolerance, pivoting=pivoting, backend=backend)
    elimination.raise_for_failure()
    return solve(elimination)


def determinant(A: ArrayLike, tolerance: float | None = None) -> float:
    """
    Determinant of a square matrix via partially pivoted elimination.

    An exactly singular matrix returns 0.0. A matrix whose elimination
    stops at a nonzero pivot below the threshold raises instead: its
    determinant is tiny but unknown.

    Raises:
        DimensionError: If A is not square
        NearSingularMatrixError: If a pivot falls below the threshold
    """
    A_arr = check_array(A, 'A')
    check_square(A_arr, 'A')
    design = AugmentedSystem.from_arrays(A_arr, np.zeros(A_arr.shape[0], dtype=A_arr.dtype))

    elimination = eliminate(design, tolerance, pivoting='partial')
    failure = elimination.failure
    if failure is not None and failure.kind is FailureKind.SINGULAR:
        return 0.0
    return elimination.determinant
