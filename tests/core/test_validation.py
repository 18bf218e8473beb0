"""
Tests for input validation utilities.

Validates:
    - check_array: conversion, float passthrough without copy, rejection
      of ragged / non-numeric input
    - check_finite, check_2d, check_square, check_augmented_shape
    - check_tolerance
"""

import numpy as np
import pytest

from gaussolve.core.exceptions import DimensionError, ValidationError
from gaussolve.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_augmented_shape,
    check_consistent_length,
    check_finite,
    check_square,
    check_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_int_list_promoted_to_float64(self):
        result = check_array([[1, 2, 3], [4, 5, 6]], "W")
        assert result.dtype == np.float64
        assert result.shape == (2, 3)

    def test_float_array_is_same_object(self):
        """Floating input is not copied, so elimination can work in place."""
        arr = np.ones((2, 3))
        assert check_array(arr, "W") is arr

    def test_float32_preserved(self):
        arr = np.ones((2, 3), dtype=np.float32)
        assert check_array(arr, "W").dtype == np.float32

    def test_ragged_rows_rejected_as_dimension_error(self):
        with pytest.raises(DimensionError, match="inconsistent lengths"):
            check_array([[1.0, 2.0, 3.0], [4.0, 5.0]], "W")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "W")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1.0], "W")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(np.array([[1 + 1j, 2.0]]), "W")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_2d_passes(self):
        check_2d(np.ones((2, 3)), "W")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.ones(3), "W")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.ones((3, 1)), "b")

    def test_check_square_passes(self):
        check_square(np.eye(3), "A")

    def test_check_square_rejects_rectangular(self):
        with pytest.raises(DimensionError, match="square"):
            check_square(np.ones((2, 3)), "A")

    def test_check_square_rejects_empty(self):
        with pytest.raises(DimensionError):
            check_square(np.ones((0, 0)), "A")

    def test_augmented_shape_returns_n(self):
        assert check_augmented_shape(np.ones((3, 4)), "W") == 3

    def test_augmented_shape_rejects_square(self):
        with pytest.raises(DimensionError, match="3 x 4") as exc_info:
            check_augmented_shape(np.ones((3, 3)), "W")
        assert exc_info.value.shape == (3, 3)

    def test_augmented_shape_rejects_empty(self):
        with pytest.raises(DimensionError, match="empty"):
            check_augmented_shape(np.ones((0, 1)), "W")

    def test_consistent_length(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            check_consistent_length(np.ones((3, 3)), np.ones(2), names=('A', 'b'))

    def test_consistent_length_name_count(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.ones(3), names=('a', 'b'))


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_tolerance
# ═══════════════════════════════════════════════════════════════════════


class TestValues:

    def test_finite_passes(self):
        check_finite(np.ones((2, 3)), "W")

    def test_nan_reported(self):
        W = np.ones((2, 3))
        W[0, 1] = np.nan
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(W, "W")

    def test_inf_reported(self):
        W = np.ones((2, 3))
        W[1, 2] = -np.inf
        with pytest.raises(ValidationError, match="0 NaN, 1 Inf"):
            check_finite(W, "W")

    def test_tolerance_returns_float(self):
        assert check_tolerance(1e-10) == 1e-10

    @pytest.mark.parametrize("bad", [0.0, -1e-12, float('nan'), float('inf')])
    def test_tolerance_rejects_non_positive(self, bad):
        with pytest.raises(ValidationError, match="tolerance"):
            check_tolerance(bad)

    def test_tolerance_rejects_non_number(self):
        with pytest.raises(ValidationError, match="expected a number"):
            check_tolerance("small")
