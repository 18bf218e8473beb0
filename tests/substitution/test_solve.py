"""
Tests for back-substitution.

Validates the row-by-row solve, precondition checks on raw and
eliminated input, and SolutionVector behaviour.
"""

import numpy as np
import pytest

from gaussolve.core.exceptions import InvalidPreconditionError, SingularMatrixError
from gaussolve.elimination import eliminate
from gaussolve.substitution import SolutionVector, check_echelon, solve


# ═══════════════════════════════════════════════════════════════════════
# Solving
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_already_upper_triangular(self, upper_system):
        x = solve(upper_system)
        x2 = 3.69 / -5.4837
        assert isinstance(x, SolutionVector)
        assert x[1] == pytest.approx(x2)
        assert x[0] == pytest.approx(-1.18 - 2.5 * x2)

    def test_magic_square_round_trip(self, magic_system, augment):
        A, b = magic_system
        x = solve(eliminate(augment(A, b)))
        np.testing.assert_allclose(A @ np.asarray(x), b, atol=1e-12)
        np.testing.assert_allclose(
            [8 * x[0] + x[1] + 6 * x[2], 3 * x[0] + 5 * x[1] + 7 * x[2], 4 * x[0] + 9 * x[1] + 2 * x[2]],
            [1.0, 4.0, 2.0],
            atol=1e-12,
        )

    def test_random_round_trip(self, random_system, augment):
        A, b, x_true = random_system
        x = solve(eliminate(augment(A, b)))
        np.testing.assert_allclose(np.asarray(x), x_true, rtol=1e-10, atol=1e-12)
        np.testing.assert_allclose(x.residual(A, b), 0.0, atol=1e-10)

    def test_input_not_modified(self, upper_system):
        before = upper_system.copy()
        solve(upper_system)
        np.testing.assert_array_equal(upper_system, before)

    def test_one_by_one(self):
        assert solve([[4.0, 2.0]]).tolist() == [0.5]

    def test_float32_preserved(self):
        W = np.array([[2.0, 1.0, 3.0], [0.0, 1.0, 1.0]], dtype=np.float32)
        x = solve(W)
        assert x.values.dtype == np.float32
        assert x.tolist() == [1.0, 1.0]

    def test_timing_and_backend(self, upper_system):
        x = solve(upper_system)
        assert x.backend_name == 'cpu_backsub'
        assert 'back_substitution' in x.timing


# ═══════════════════════════════════════════════════════════════════════
# Preconditions
# ═══════════════════════════════════════════════════════════════════════


class TestPreconditions:

    def test_failed_elimination(self):
        failed = eliminate([[1.0, 1.0, 2.0], [1.0, 1.0, 2.0]])
        with pytest.raises(InvalidPreconditionError) as exc_info:
            solve(failed)
        assert exc_info.value.reason == 'failed_elimination'
        assert exc_info.value.row == 1
        assert isinstance(exc_info.value.__cause__, SingularMatrixError)

    def test_not_upper_triangular(self):
        with pytest.raises(InvalidPreconditionError) as exc_info:
            solve([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert exc_info.value.reason == 'not_upper_triangular'
        assert exc_info.value.row == 1

    def test_zero_diagonal(self):
        with pytest.raises(InvalidPreconditionError) as exc_info:
            solve([[1.0, 2.0, 3.0], [0.0, 0.0, 6.0]])
        assert exc_info.value.reason == 'zero_diagonal'
        assert exc_info.value.row == 1

    def test_near_zero_diagonal(self):
        with pytest.raises(InvalidPreconditionError, match="below threshold"):
            solve([[1.0, 2.0, 3.0], [0.0, 1e-15, 6.0]])

    def test_huge_entries_pass_echelon_check(self):
        x = solve([[1e308, 1e308, 1e308], [0.0, 1e308, 1e308]])
        assert x.tolist() == [0.0, 1.0]

    def test_roundoff_below_diagonal_tolerated(self):
        x = solve([[1.0, 1.0, 2.0], [1e-17, 1.0, 1.0]])
        assert x.tolist() == [1.0, 1.0]

    def test_wrong_shape(self):
        with pytest.raises(InvalidPreconditionError) as exc_info:
            solve(np.eye(3))
        assert exc_info.value.reason == 'shape'

    def test_check_echelon_passes(self, upper_system):
        check_echelon(upper_system, 2, 1e-12)


# ═══════════════════════════════════════════════════════════════════════
# SolutionVector
# ═══════════════════════════════════════════════════════════════════════


class TestSolutionVector:

    @pytest.fixture
    def x(self):
        return solve([[2.0, 0.0, 2.0], [0.0, 4.0, 2.0]])

    def test_sequence_protocol(self, x):
        assert len(x) == 2
        assert list(x) == [1.0, 0.5]
        assert x[-1] == 0.5

    def test_asarray(self, x):
        arr = np.asarray(x)
        assert arr.shape == (2,)
        np.testing.assert_array_equal(arr, [1.0, 0.5])

    def test_asarray_dtype(self, x):
        assert np.asarray(x, dtype=np.float32).dtype == np.float32

    def test_summary_and_repr(self, x):
        assert "x[1] = 0.500000" in x.summary()
        assert repr(x) == "SolutionVector([1.0, 0.5])"
