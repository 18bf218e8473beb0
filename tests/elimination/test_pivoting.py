"""
Tests for pivot selection, row-swap bookkeeping and the LU byproduct.
"""

import numpy as np
import pytest

from gaussolve.elimination import FailureKind, eliminate


def _random_augmented(rng, n):
    return np.column_stack([rng.standard_normal((n, n)), rng.standard_normal(n)])


# ═══════════════════════════════════════════════════════════════════════
# Partial pivoting
# ═══════════════════════════════════════════════════════════════════════


class TestPartialPivoting:

    @pytest.mark.parametrize("n", [2, 3, 5, 10, 25])
    def test_multipliers_bounded_by_one(self, rng, n):
        """The chosen pivot dominates every candidate below it, so |m| <= 1."""
        result = eliminate(_random_augmented(rng, n))
        assert result.succeeded
        assert np.all(np.abs(result.multipliers) <= 1.0)

    def test_first_pivot_is_column_maximum(self, rng):
        W = _random_augmented(rng, 6)
        column_max = float(np.max(np.abs(W[:, 0])))
        result = eliminate(W)
        assert result.pivots[0].magnitude == column_max
        assert abs(W[0, 0]) == column_max

    def test_pivot_magnitudes_match_diagonal(self, rng):
        result = eliminate(_random_augmented(rng, 6))
        np.testing.assert_array_equal(
            [p.magnitude for p in result.pivots],
            np.abs(np.diagonal(result.upper)),
        )

    def test_swap_count_matches_records(self, rng):
        result = eliminate(_random_augmented(rng, 8))
        assert result.n_swaps == sum(p.swapped for p in result.pivots)

    def test_lu_reconstruction(self, rng):
        W = _random_augmented(rng, 7)
        A = W[:, :-1].copy()
        result = eliminate(W)
        L = result.multipliers
        np.testing.assert_allclose(np.diag(L), 1.0)
        np.testing.assert_array_equal(np.triu(L, 1), 0.0)
        np.testing.assert_allclose(A[result.permutation], L @ result.upper, atol=1e-12)

    def test_permutation_is_a_permutation(self, rng):
        result = eliminate(_random_augmented(rng, 9))
        assert sorted(result.permutation.tolist()) == list(range(9))

    def test_zero_leading_entry_needs_swap(self):
        result = eliminate([[0.0, 1.0, 1.0], [1.0, 0.0, 1.0]])
        assert result.succeeded
        assert result.n_swaps == 1
        assert result.determinant == -1.0


# ═══════════════════════════════════════════════════════════════════════
# Determinant sign
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminantSign:

    def test_odd_permutation_flips_sign(self, magic_system, augment):
        A, b = magic_system
        base = eliminate(augment(A, b)).determinant
        swapped = eliminate(augment(A[[1, 0, 2]], b[[1, 0, 2]])).determinant
        assert swapped == pytest.approx(-base, rel=1e-12)

    def test_even_permutation_keeps_sign(self, magic_system, augment):
        A, b = magic_system
        base = eliminate(augment(A, b)).determinant
        cycled = eliminate(augment(A[[1, 2, 0]], b[[1, 2, 0]])).determinant
        assert cycled == pytest.approx(base, rel=1e-12)

    def test_matches_numpy(self, rng):
        W = _random_augmented(rng, 6)
        expected = np.linalg.det(W[:, :-1])
        assert eliminate(W).determinant == pytest.approx(expected, rel=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Idempotence
# ═══════════════════════════════════════════════════════════════════════


class TestIdempotence:

    def test_second_pass_changes_nothing(self, rng):
        first = eliminate(_random_augmented(rng, 6))
        echelon = first.echelon.copy()
        second = eliminate(echelon)
        assert second.n_swaps == 0
        np.testing.assert_array_equal(second.multipliers, np.eye(6))
        np.testing.assert_array_equal(second.echelon, first.echelon)
        assert second.determinant == pytest.approx(first.determinant * (-1) ** first.n_swaps)


# ═══════════════════════════════════════════════════════════════════════
# No pivoting
# ═══════════════════════════════════════════════════════════════════════


class TestNoPivoting:

    def test_never_swaps(self, magic_system, augment):
        result = eliminate(augment(*magic_system), pivoting='none')
        assert result.succeeded
        assert result.n_swaps == 0
        assert [p.row for p in result.pivots] == [0, 1, 2]
        assert result.backend_name == 'cpu_gauss_none'
        assert result.determinant == pytest.approx(-360.0, rel=1e-12)

    def test_multipliers_may_exceed_one(self, magic_system, augment):
        result = eliminate(augment(*magic_system), pivoting='none')
        assert result.multipliers[2, 1] == pytest.approx(8.5 / 4.625)

    def test_zero_diagonal_stops(self):
        result = eliminate([[0.0, 1.0, 1.0], [1.0, 0.0, 1.0]], pivoting='none')
        assert result.failure.kind is FailureKind.SINGULAR
        assert result.failure.row == 0
