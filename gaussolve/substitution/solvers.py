"""
Solver dispatch for back-substitution.

This module provides the solve() function (public API) and the echelon
precondition check that guards it.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from gaussolve.core.exceptions import DimensionError, InvalidPreconditionError
from gaussolve.core.validation import (
    check_array,
    check_finite,
    check_augmented_shape,
    check_tolerance,
)
from gaussolve.core.compute.precision import pivot_threshold, scaled_infinity_norm
from gaussolve.core.compute.tolerances import default_pivot_tolerance
from gaussolve.elimination.solution import EliminationSolution
from gaussolve.substitution.solution import SolutionVector
from gaussolve.substitution.backends.cpu import CPUBackSubstitutionBackend


def solve(
    system: EliminationSolution | ArrayLike,
    tolerance: float | None = None,
    *,
    scale_tolerance: bool = True,
) -> SolutionVector:
    """
    Solve an echelon-form augmented system by back-substitution.

    Args:
        system: A successful EliminationSolution, or an N x (N+1) matrix
            whose coefficient block is already upper triangular
        tolerance: Threshold for treating an entry as zero when checking
            a raw matrix. Ignored for an EliminationSolution, which
            carries the threshold its elimination used.
        scale_tolerance: Scale tolerance by the infinity norm of the
            coefficient block (raw matrices only)

    Returns:
        SolutionVector of length N. The input is not modified.

    Raises:
        InvalidPreconditionError: If the elimination failed, the shape is
            not N x (N+1), an entry below the diagonal is nonzero, or a
            diagonal entry is (near) zero

    Example:
        >>> from gaussolve.elimination import eliminate
        >>> from gaussolve.substitution import solve
        >>> x = solve(eliminate([[2.0, 1.0, 3.0], [4.0, 3.0, 7.0]]))
        >>> x.tolist()
        [1.0, 1.0]
    """
    if isinstance(system, EliminationSolution):
        failure = system.failure
        if failure is not None:
            raise InvalidPreconditionError(
                f"Back-substitution requires a successful elimination; "
                f"elimination failed with {failure.kind.value}: {failure.message}",
                row=failure.row,
                reason='failed_elimination',
            ) from failure.to_exception()
        echelon = system.echelon
        n = system.n
        threshold = system.threshold
    else:
        echelon = check_array(system, 'echelon')
        try:
            n = check_augmented_shape(echelon, 'echelon')
        except DimensionError as e:
            raise InvalidPreconditionError(str(e), reason='shape') from e
        check_finite(echelon, 'echelon')
        tol = check_tolerance(tolerance) if tolerance is not None else default_pivot_tolerance(echelon.dtype)
        threshold = pivot_threshold(tol, scaled_infinity_norm(echelon[:, :n]), scale_tolerance)

    check_echelon(echelon, n, threshold)

    return SolutionVector(_result=CPUBackSubstitutionBackend().solve(echelon))


def check_echelon(
    echelon: NDArray[np.floating[Any]],
    n: int,
    threshold: float,
) -> None:
    """
    Verify the coefficient block is upper triangular with a usable diagonal.

    Entries below the diagonal with magnitude <= threshold count as zero;
    diagonal entries must have magnitude >= threshold.

    Raises:
        InvalidPreconditionError: On the first offending row
    """
    U = echelon[:, :n]

    below = np.abs(np.tril(U, -1)) > threshold
    if np.any(below):
        row = int(np.argmax(np.any(below, axis=1)))
        col = int(np.argmax(below[row]))
        raise InvalidPreconditionError(
            f"Coefficient block is not upper triangular: entry ({row}, {col}) "
            f"= {U[row, col]:.3e} exceeds threshold {threshold:.3e}",
            row=row,
            reason='not_upper_triangular',
        )

    diagonal = np.abs(np.diagonal(U))
    small = diagonal < threshold
    if np.any(small):
        row = int(np.argmax(small))
        raise InvalidPreconditionError(
            f"Diagonal entry {row} is {U[row, row]:.3e}, below threshold "
            f"{threshold:.3e}; the system has no unique solution",
            row=row,
            reason='zero_diagonal',
        )
