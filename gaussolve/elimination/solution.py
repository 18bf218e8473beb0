"""
Elimination solution types.

Contains the per-stage pivot record, the success payload, the failure
record and the user-facing solution wrapper. An elimination either
succeeds (EliminationParams) or fails (EliminationFailure); the wrapper
is the tagged union the caller inspects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from gaussolve.core.result import Result
from gaussolve.core.exceptions import (
    GaussSolveError,
    DimensionError,
    SingularMatrixError,
    NearSingularMatrixError,
)

if TYPE_CHECKING:
    from gaussolve.elimination.design import AugmentedSystem


class FailureKind(Enum):
    """Why an elimination stopped."""
    DIMENSION_MISMATCH = 'dimension_mismatch'
    SINGULAR = 'singular'
    NEAR_SINGULAR = 'near_singular'

    @property
    def is_singular(self) -> bool:
        """True for both exact and numerical singularity."""
        return self in (FailureKind.SINGULAR, FailureKind.NEAR_SINGULAR)


@dataclass(frozen=True)
class PivotRecord:
    """
    Pivot chosen at one elimination stage.

    Attributes:
        stage: Elimination stage (equals the diagonal position filled)
        row: Row the pivot was taken from, before the swap
        magnitude: |pivot|
    """
    stage: int
    row: int
    magnitude: float

    @property
    def swapped(self) -> bool:
        return self.row != self.stage


@dataclass(frozen=True)
class EliminationParams:
    """
    Success payload of an elimination.

    echelon is the caller's (or the private) augmented matrix, now upper
    triangular in its coefficient block. multipliers and permutation
    satisfy A[permutation] == multipliers @ echelon[:, :n].
    """
    echelon: NDArray[np.floating[Any]]
    determinant: float
    n_swaps: int
    pivots: tuple[PivotRecord, ...]
    multipliers: NDArray[np.floating[Any]]
    permutation: NDArray[np.intp]
    threshold: float


@dataclass(frozen=True)
class EliminationFailure:
    """
    Failure record of an elimination.

    Attributes:
        kind: What went wrong
        row: Stage / row at which elimination stopped (None for shape errors)
        message: Human-readable description
        pivot_magnitude: Best candidate pivot magnitude at that stage
        threshold: Effective pivot threshold that was applied
        shape: Offending input shape, for dimension mismatches
    """
    kind: FailureKind
    row: int | None
    message: str
    pivot_magnitude: float | None = None
    threshold: float | None = None
    shape: tuple[int, ...] | None = None

    def to_exception(self) -> GaussSolveError:
        """The exception a caller would raise for this failure."""
        if self.kind is FailureKind.DIMENSION_MISMATCH:
            return DimensionError(self.message, shape=self.shape)
        cls = NearSingularMatrixError if self.kind is FailureKind.NEAR_SINGULAR else SingularMatrixError
        return cls(
            self.message,
            row=self.row,
            pivot_magnitude=self.pivot_magnitude,
            threshold=self.threshold,
        )


@dataclass
class EliminationSolution:
    """
    User-facing elimination result.

    Either a success, exposing the echelon matrix, determinant and swap
    count, or a failure, exposing `failure`. Success-only accessors raise
    the failure's exception when called on a failed elimination, so a
    singular system can never leak a numeric result.
    """
    _result: Result[EliminationParams | EliminationFailure]
    _design: 'AugmentedSystem | None'

    @property
    def succeeded(self) -> bool:
        return isinstance(self._result.params, EliminationParams)

    @property
    def failure(self) -> EliminationFailure | None:
        params = self._result.params
        return params if isinstance(params, EliminationFailure) else None

    def raise_for_failure(self) -> None:
        """Raise the failure's exception; no-op on success."""
        failure = self.failure
        if failure is not None:
            raise failure.to_exception()

    @property
    def _params(self) -> EliminationParams:
        self.raise_for_failure()
        return self._result.params

    @property
    def echelon(self) -> NDArray[np.floating[Any]]:
        """Augmented matrix in row-echelon form."""
        return self._params.echelon

    @property
    def upper(self) -> NDArray[np.floating[Any]]:
        """Upper-triangular coefficient block U (a view into echelon)."""
        n = self.n
        return self._params.echelon[:, :n]

    @property
    def determinant(self) -> float:
        return self._params.determinant

    @property
    def n_swaps(self) -> int:
        return self._params.n_swaps

    @property
    def pivots(self) -> tuple[PivotRecord, ...]:
        return self._params.pivots

    @property
    def multipliers(self) -> NDArray[np.floating[Any]]:
        """Unit lower-triangular L of the row multipliers."""
        return self._params.multipliers

    @property
    def permutation(self) -> NDArray[np.intp]:
        """Original row index now sitting at each position."""
        return self._params.permutation

    @property
    def threshold(self) -> float:
        """Absolute pivot threshold used for this elimination."""
        return self._params.threshold

    @property
    def n(self) -> int:
        if self._design is None:
            raise self.failure.to_exception()
        return self._design.n

    @property
    def design(self) -> 'AugmentedSystem | None':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text report of the elimination."""
        lines = [
            "Gaussian Elimination",
            "=" * 60,
        ]
        failure = self.failure
        if failure is not None:
            lines.append(f"Status: FAILED ({failure.kind.value})")
            lines.append(failure.message)
        else:
            params = self._result.params
            lines.extend([
                "Status: OK",
                f"Unknowns: {self.n}",
                f"Pivoting: {self.info.get('pivoting')}",
                f"Row swaps: {params.n_swaps}",
                f"Determinant: {params.determinant:.6g}",
                f"Pivot threshold: {params.threshold:.3g}",
                f"Pivot ratio: {self.info.get('pivot_ratio', float('nan')):.3g}",
                f"Growth factor: {self.info.get('growth_factor', float('nan')):.3g}",
            ])
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        failure = self.failure
        if failure is not None:
            return f"EliminationSolution(failed={failure.kind.value}, row={failure.row})"
        params = self._result.params
        return (
            f"EliminationSolution(n={self.n}, n_swaps={params.n_swaps}, "
            f"determinant={params.determinant:.6g})"
        )
