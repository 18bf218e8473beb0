"""
CPU backend for back-substitution.

Solves an upper-triangular augmented system [U | c] from the last row
upward. Read-only with respect to the input; the running sum for each
row is a dot product in the matrix's own dtype.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from gaussolve.core.result import Result
from gaussolve.core.compute.timing import Timer
from gaussolve.substitution.solution import SubstitutionParams


class CPUBackSubstitutionBackend:
    """CPU backend implementing x[i] = (c[i] - U[i, i+1:] @ x[i+1:]) / U[i, i]."""

    @property
    def name(self) -> str:
        return 'cpu_backsub'

    def solve(self, echelon: NDArray[np.floating[Any]]) -> Result[SubstitutionParams]:
        """
        Args:
            echelon: Validated N x (N+1) matrix with an upper-triangular,
                nonsingular coefficient block

        Returns:
            Result containing SubstitutionParams
        """
        timer = Timer()
        timer.start()

        n = echelon.shape[0]
        x = np.empty(n, dtype=echelon.dtype)

        with timer.section('back_substitution'):
            x[n - 1] = echelon[n - 1, n] / echelon[n - 1, n - 1]
            for i in range(n - 2, -1, -1):
                s = echelon[i, i + 1:n] @ x[i + 1:]
                x[i] = (echelon[i, n] - s) / echelon[i, i]

        timer.stop()

        return Result(
            params=SubstitutionParams(x=x),
            info={'method': 'back_substitution', 'n': n},
            timing=timer.result(),
            backend_name=self.name,
        )
