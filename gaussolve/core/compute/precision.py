"""
Numerical precision constants and utilities.

Machine epsilon, the smallest usable norm scale, and matrix norms used
to turn a relative pivot tolerance into an absolute threshold.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def is_single_precision(dtype: np.dtype | type) -> bool:
    """True if dtype carries no more precision than float32."""
    return machine_epsilon(dtype) >= EPSILON_32


def scaled_infinity_norm(A: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """
    Infinity norm of a 2D array as a pair (scale, factor).

    ||A||_inf == scale * factor, where scale = max|a_ij| and
    1 <= factor <= number of columns. Row sums run on A / scale, so they
    stay finite for any finite A even when the norm itself exceeds the
    largest representable float.

    Returns:
        (0.0, 0.0) for an empty or all-zero array
    """
    if A.size == 0:
        return 0.0, 0.0
    scale = float(np.max(np.abs(A)))
    if scale == 0.0:
        return 0.0, 0.0
    factor = float(np.max(np.sum(np.abs(A) / scale, axis=1)))
    return scale, factor


def infinity_norm(A: NDArray[np.floating[Any]]) -> float:
    """
    Maximum absolute row sum of a 2D array (0.0 for an empty array).

    Returns inf when the norm exceeds the largest representable float;
    use scaled_infinity_norm() where the value feeds a threshold.
    """
    if A.size == 0:
        return 0.0
    with np.errstate(over='ignore'):
        return float(np.max(np.sum(np.abs(A), axis=1)))


def pivot_threshold(
    tolerance: float,
    norm: float | tuple[float, float],
    scale: bool = True,
) -> float:
    """
    Convert a pivot tolerance into the absolute threshold used by elimination.

    With scale=True the tolerance is relative to the coefficient block's
    infinity norm, so multiplying the whole system by a constant does
    not change which pivots are rejected. A zero norm (all-zero block)
    leaves the tolerance absolute.

    Args:
        tolerance: Positive tolerance
        norm: Infinity norm of the coefficient block, or the
            (scale, factor) pair from scaled_infinity_norm(). The pair
            is applied as (tolerance * scale) * factor, which stays
            finite when the norm alone would overflow.
        scale: Whether to scale by the norm

    Returns:
        Absolute pivot threshold
    """
    if isinstance(norm, tuple):
        norm_scale, factor = norm
    else:
        norm_scale, factor = norm, 1.0
    if not scale or norm_scale == 0.0:
        return tolerance
    return tolerance * norm_scale * factor
