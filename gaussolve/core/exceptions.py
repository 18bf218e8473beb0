"""
Exception hierarchy for gaussolve.

All exceptions inherit from GaussSolveError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class GaussSolveError(Exception):
    """Base exception for all gaussolve errors."""
    pass


class ValidationError(GaussSolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    data, NaN/Inf entries, non-positive tolerance).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised for an empty matrix, ragged rows, or a coefficient block
    that is not square (an augmented system must be N x (N+1)).

    Attributes:
        shape: Shape that was received, if known
        expected: Human-readable description of the expected shape
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        expected: str | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.expected = expected


class NumericalError(GaussSolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during elimination.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular: a pivot is exactly zero.

    The system has no unique solution. Retrying with the same matrix and
    tolerance reproduces the failure.

    Attributes:
        row: Row (elimination stage) at which no usable pivot was found
        pivot_magnitude: Largest candidate pivot magnitude at that stage
        threshold: Effective pivot threshold that was applied
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        pivot_magnitude: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.pivot_magnitude = pivot_magnitude
        self.threshold = threshold


class NearSingularMatrixError(SingularMatrixError):
    """
    Matrix is numerically singular: the best pivot is nonzero but below
    the effective tolerance.
    """
    pass


class InvalidPreconditionError(GaussSolveError):
    """
    Back-substitution was invoked on input that is not a valid echelon form.

    This is a programming error: the input was not produced by a
    successful elimination, has nonzero entries below the diagonal, or
    has a near-zero diagonal entry.

    Attributes:
        row: Offending row, if a single one can be named
        reason: Short machine-readable reason ('failed_elimination',
            'not_upper_triangular', 'zero_diagonal', 'shape')
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.reason = reason
