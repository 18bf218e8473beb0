"""
Input validation utilities for gaussolve.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from gaussolve.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating numpy array.

    Floating ndarrays are returned as-is (same object, no copy), so that
    in-place elimination operates on the caller's buffer. Integer input is
    promoted to float64. Ragged nested sequences are reported as a
    dimension problem.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        DimensionError: If rows have inconsistent lengths
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        # NumPy refuses ragged nested sequences outright
        raise DimensionError(
            f"{name}: rows have inconsistent lengths ({e})",
            expected="rectangular matrix",
        ) from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            shape=tuple(array.shape),
            expected=f"{ndim}D array",
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square and non-empty.

    Raises:
        DimensionError: If the array is empty or not square
    """
    check_2d(array, name)
    n, m = array.shape
    if n == 0 or n != m:
        raise DimensionError(
            f"{name}: expected non-empty square matrix, got shape {array.shape}",
            shape=tuple(array.shape),
            expected="N x N with N >= 1",
        )


def check_augmented_shape(array: NDArray[np.floating[Any]], name: str) -> int:
    """
    Verify a 2D array is an augmented system [A | b] of shape N x (N+1).

    Args:
        array: Array to check
        name: Parameter name for error messages

    Returns:
        N, the number of unknowns

    Raises:
        DimensionError: If the array is empty or not N x (N+1)
    """
    check_2d(array, name)
    n, m = array.shape
    if n == 0:
        raise DimensionError(
            f"{name}: augmented matrix is empty",
            shape=tuple(array.shape),
            expected="N x (N+1) with N >= 1",
        )
    if m != n + 1:
        raise DimensionError(
            f"{name}: expected {n} x {n + 1} augmented matrix "
            f"(square coefficient block plus one right-hand-side column), "
            f"got shape {array.shape}",
            shape=tuple(array.shape),
            expected=f"{n} x {n + 1}",
        )
    return n


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_tolerance(tolerance: float, name: str = 'tolerance') -> float:
    """
    Verify a pivot tolerance is a finite, strictly positive number.

    Returns:
        The tolerance as a Python float

    Raises:
        ValidationError: If tolerance is not a positive finite number
    """
    try:
        value = float(tolerance)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {tolerance!r}") from e
    if not math.isfinite(value) or value <= 0.0:
        raise ValidationError(f"{name}: must be finite and > 0, got {value}")
    return value
