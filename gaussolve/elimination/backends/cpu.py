"""
CPU reference backend for Gaussian elimination.

Reduces the augmented matrix in place with NumPy, one stage at a time.
Within a stage every row below the pivot is updated in a single rank-1
update; stages run strictly in order because stage i+1 reads what
stage i wrote. Arithmetic stays in the matrix's own dtype.
"""

from typing import Literal
import numpy as np

from gaussolve.core.result import Result
from gaussolve.core.compute.timing import Timer
from gaussolve.core.compute.precision import pivot_threshold
from gaussolve.core.compute.tolerances import default_pivot_tolerance
from gaussolve.elimination.design import AugmentedSystem
from gaussolve.elimination.solution import PivotRecord, EliminationParams, EliminationFailure
from gaussolve.elimination._common import (
    classify_pivot,
    base_info,
    success_result,
    failure_result,
)

Pivoting = Literal['partial', 'none']


class CPUGaussBackend:
    """
    CPU backend for Gaussian elimination.

    Implements the Backend protocol for AugmentedSystem ->
    EliminationParams | EliminationFailure.

    With pivoting='partial' each stage brings the row with the largest
    |entry| in the pivot column to the diagonal, so every multiplier has
    magnitude <= 1. With pivoting='none' rows are never exchanged and the
    diagonal entry itself must clear the threshold.
    """

    def __init__(
        self,
        pivoting: Pivoting = 'partial',
        tolerance: float | None = None,
        scale_tolerance: bool = True,
    ):
        if pivoting not in ('partial', 'none'):
            raise ValueError(f"Unknown pivoting: {pivoting!r}. Use 'partial' or 'none'.")
        self.pivoting = pivoting
        self.tolerance = tolerance
        self.scale_tolerance = scale_tolerance

    @property
    def name(self) -> str:
        return f'cpu_gauss_{self.pivoting}'

    def solve(self, design: AugmentedSystem) -> Result[EliminationParams | EliminationFailure]:
        """
        Reduce design.matrix to row-echelon form in place.

        Algorithm, for stage i = 0..N-1:
            1. Pick the pivot row (largest |W[j, i]| for j >= i, or i itself)
            2. Reject a zero or below-threshold pivot
            3. Swap it into row i, counting the swap
            4. W[j, i:] -= (W[j, i] / W[i, i]) * W[i, i:] for all j > i

        Args:
            design: Validated augmented system; its matrix is mutated

        Returns:
            Result with EliminationParams on success, EliminationFailure
            (the matrix left partially reduced) on a bad pivot
        """
        timer = Timer()
        timer.start()

        W = design.matrix
        n = design.n
        tolerance = self.tolerance if self.tolerance is not None else default_pivot_tolerance(W.dtype)
        threshold = pivot_threshold(tolerance, design.scaled_norm, self.scale_tolerance)
        info = base_info(design, self.pivoting, tolerance, threshold, W.dtype)

        L = np.eye(n, dtype=W.dtype)
        permutation = np.arange(n)
        pivots: list[PivotRecord] = []
        n_swaps = 0

        for i in range(n):
            # === Pivot Selection ===
            with timer.section('pivot_search'):
                if self.pivoting == 'partial':
                    p = i + int(np.argmax(np.abs(W[i:, i])))
                else:
                    p = i
                magnitude = float(abs(W[p, i]))

            pivots.append(PivotRecord(stage=i, row=p, magnitude=magnitude))
            failure = classify_pivot(i, magnitude, threshold)
            if failure is not None:
                timer.stop()
                return failure_result(
                    failure,
                    pivots=pivots,
                    n_swaps=n_swaps,
                    info=info,
                    timing=timer.result(),
                    backend_name=self.name,
                )

            # === Row Exchange ===
            if p != i:
                W[[i, p]] = W[[p, i]]
                L[[i, p], :i] = L[[p, i], :i]
                permutation[[i, p]] = permutation[[p, i]]
                n_swaps += 1

            # === Row Reduction ===
            if i < n - 1:
                with timer.section('row_reduction'):
                    m = W[i + 1:, i] / W[i, i]
                    W[i + 1:, i + 1:] -= np.outer(m, W[i, i + 1:])
                    W[i + 1:, i] = 0.0
                    L[i + 1:, i] = m

        timer.stop()

        return success_result(
            design,
            pivots=pivots,
            multipliers=L,
            permutation=permutation,
            n_swaps=n_swaps,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
