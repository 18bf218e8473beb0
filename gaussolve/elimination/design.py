"""
Augmented system design.

AugmentedSystem wraps the caller's N x (N+1) matrix [A | b] for the
duration of one elimination. It borrows the caller's buffer rather than
copying it: a floating ndarray is reduced in place, and a list of row
lists is rewritten in place once elimination finishes. Callers that need
the original matrix must copy first (or pass copy=True).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from gaussolve.core.exceptions import ValidationError
from gaussolve.core.compute.precision import infinity_norm, scaled_infinity_norm
from gaussolve.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_square,
    check_augmented_shape,
    check_consistent_length,
)


@dataclass(frozen=True)
class AugmentedSystem:
    """
    Augmented matrix [A | b] ready for elimination.

    Construction:
        AugmentedSystem.from_matrix(W)            # borrow W (N x (N+1))
        AugmentedSystem.from_matrix(W, copy=True) # work on a private copy
        AugmentedSystem.from_arrays(A, b)         # fresh matrix from A and b

    The frozen dataclass pins the buffer, not its contents: backends write
    the echelon form into `matrix`.
    """
    _W: NDArray[np.floating[Any]]
    _n: int
    _norm: float
    _max_abs: float
    _norm_factor: float
    _target: list | None = None

    @classmethod
    def from_matrix(cls, matrix: ArrayLike, *, copy: bool = False) -> AugmentedSystem:
        """
        Build from an augmented matrix.

        Args:
            matrix: N x (N+1) floating ndarray or list of row lists
            copy: If True, never touch the caller's matrix

        Raises:
            DimensionError: If the matrix is empty, ragged or not N x (N+1)
            ValidationError: If the matrix is non-numeric, contains NaN/Inf,
                or is a non-writable / integer ndarray borrowed with copy=False
        """
        target = None
        if isinstance(matrix, np.ndarray):
            W = check_array(matrix, 'matrix')
            if copy:
                W = W.copy()
            elif not np.issubdtype(matrix.dtype, np.floating):
                raise ValidationError(
                    f"matrix: in-place elimination requires a floating dtype, "
                    f"got {matrix.dtype}; pass copy=True or convert first"
                )
            elif not W.flags.writeable:
                raise ValidationError(
                    "matrix: array is read-only; pass copy=True to eliminate a copy"
                )
        else:
            W = check_array(matrix, 'matrix')
            if not copy and _is_row_list(matrix):
                target = matrix

        n = check_augmented_shape(W, 'matrix')
        check_finite(W, 'matrix')

        return cls._build(W, n, target)

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> AugmentedSystem:
        """
        Build a fresh augmented matrix from coefficients and right-hand side.

        A and b are never mutated. b may be (N,) or (N, 1).
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()

        check_square(A_arr, 'A')
        check_1d(b_arr, 'b')
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        dtype = np.result_type(A_arr.dtype, b_arr.dtype)
        W = np.empty((A_arr.shape[0], A_arr.shape[0] + 1), dtype=dtype)
        W[:, :-1] = A_arr
        W[:, -1] = b_arr
        return cls._build(W, A_arr.shape[0], None)

    @classmethod
    def _build(cls, W: NDArray, n: int, target: list | None) -> AugmentedSystem:
        A = W[:, :n]
        max_abs, factor = scaled_infinity_norm(A)
        return cls(
            _W=W,
            _n=n,
            _norm=infinity_norm(A),
            _max_abs=max_abs,
            _norm_factor=factor,
            _target=target,
        )

    def copy(self) -> AugmentedSystem:
        """Independent system over a copy of the current matrix."""
        return AugmentedSystem._build(self._W.copy(), self._n, None)

    # === Properties ===

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Working augmented matrix (N x (N+1)), mutated by elimination."""
        return self._W

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """View of the coefficient block A (N x N)."""
        return self._W[:, :self._n]

    @property
    def rhs(self) -> NDArray[np.floating[Any]]:
        """View of the right-hand-side column b (N,)."""
        return self._W[:, self._n]

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n

    @property
    def norm(self) -> float:
        """Infinity norm of A, measured before elimination."""
        return self._norm

    @property
    def max_abs(self) -> float:
        """Largest |a_ij| of A, measured before elimination."""
        return self._max_abs

    @property
    def scaled_norm(self) -> tuple[float, float]:
        """
        Infinity norm of A as (max_abs, factor), see scaled_infinity_norm().

        Finite for any finite A, so pivot thresholds derived from it do not
        overflow when `norm` does.
        """
        return self._max_abs, self._norm_factor

    @property
    def dtype(self) -> np.dtype:
        return self._W.dtype

    @property
    def is_borrowed_list(self) -> bool:
        """True if results are written back into a caller-owned row list."""
        return self._target is not None

    def write_back(self) -> None:
        """Copy the working matrix into the caller's row lists, if any."""
        if self._target is None:
            return
        for row, values in zip(self._target, self._W.tolist()):
            row[:] = values


def _is_row_list(matrix: Any) -> bool:
    """A list whose rows are lists can be rewritten in place."""
    return isinstance(matrix, list) and all(isinstance(row, list) for row in matrix)

