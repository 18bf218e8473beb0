"""
Shared pieces of the elimination backends.

Pivot classification and Result assembly are identical on every device,
so CPU and GPU backends only differ in how they move rows.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from gaussolve.core.result import Result
from gaussolve.core.exceptions import DimensionError
from gaussolve.core.compute.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from gaussolve.elimination.design import AugmentedSystem
from gaussolve.elimination.solution import (
    FailureKind,
    PivotRecord,
    EliminationParams,
    EliminationFailure,
)


def classify_pivot(
    stage: int,
    magnitude: float,
    threshold: float,
) -> EliminationFailure | None:
    """
    Decide whether a pivot is usable.

    An exactly zero pivot means no candidate row has a nonzero entry in
    this column: the matrix is singular. A nonzero pivot below threshold
    is numerically indistinguishable from zero at the requested tolerance.

    Returns:
        None if the pivot is usable, else the failure record
    """
    if magnitude == 0.0:
        return EliminationFailure(
            kind=FailureKind.SINGULAR,
            row=stage,
            message=(
                f"Matrix is singular: no nonzero pivot in column {stage} "
                f"at or below row {stage}"
            ),
            pivot_magnitude=magnitude,
            threshold=threshold,
        )
    if magnitude < threshold:
        return EliminationFailure(
            kind=FailureKind.NEAR_SINGULAR,
            row=stage,
            message=(
                f"Matrix is numerically singular: best pivot for row {stage} "
                f"is {magnitude:.3e}, below threshold {threshold:.3e}"
            ),
            pivot_magnitude=magnitude,
            threshold=threshold,
        )
    return None


def base_info(
    design: AugmentedSystem,
    pivoting: str,
    tolerance: float,
    threshold: float,
    working_dtype: np.dtype | type,
) -> dict[str, Any]:
    """Info shared by success and failure; working_dtype is the precision the stages ran in."""
    return {
        'method': 'gauss',
        'pivoting': pivoting,
        'n': design.n,
        'tolerance': tolerance,
        'threshold': threshold,
        'norm': design.norm,
        'working_dtype': np.dtype(working_dtype).name,
    }


def success_result(
    design: AugmentedSystem,
    *,
    pivots: list[PivotRecord],
    multipliers: NDArray[np.floating[Any]],
    permutation: NDArray[np.intp],
    n_swaps: int,
    info: dict[str, Any],
    timing: dict[str, float] | None,
    backend_name: str,
    warnings: tuple[str, ...] = (),
) -> Result[EliminationParams]:
    """Assemble the Result for a completed elimination."""
    W = design.matrix
    n = design.n
    diagonal = np.diagonal(W[:, :n])
    sign = -1.0 if n_swaps % 2 else 1.0
    determinant = sign * float(np.prod(diagonal))

    magnitudes = [p.magnitude for p in pivots]
    pivot_ratio = min(magnitudes) / max(magnitudes)
    growth_factor = (
        float(np.max(np.abs(W[:, :n]))) / design.max_abs
        if design.max_abs > 0 else float('nan')
    )
    info = dict(info, n_swaps=n_swaps, pivot_ratio=pivot_ratio, growth_factor=growth_factor)

    if pivot_ratio < ILL_CONDITIONED_PIVOT_RATIO:
        warnings = warnings + (
            f"ill-conditioned: smallest/largest pivot ratio {pivot_ratio:.2e} "
            f"is below {ILL_CONDITIONED_PIVOT_RATIO:.0e}",
        )

    params = EliminationParams(
        echelon=W,
        determinant=determinant,
        n_swaps=n_swaps,
        pivots=tuple(pivots),
        multipliers=multipliers,
        permutation=permutation,
        threshold=info['threshold'],
    )
    return Result(
        params=params,
        info=info,
        timing=timing,
        backend_name=backend_name,
        warnings=warnings,
    )


def failure_result(
    failure: EliminationFailure,
    *,
    pivots: list[PivotRecord],
    n_swaps: int,
    info: dict[str, Any],
    timing: dict[str, float] | None,
    backend_name: str,
    warnings: tuple[str, ...] = (),
) -> Result[EliminationFailure]:
    """Assemble the Result for an elimination that stopped at a bad pivot."""
    info = dict(info, n_swaps=n_swaps, failed_stage=failure.row, pivots=tuple(pivots))
    return Result(
        params=failure,
        info=info,
        timing=timing,
        backend_name=backend_name,
        warnings=warnings,
    )


def dimension_failure(error: DimensionError) -> Result[EliminationFailure]:
    """Result for input that never reached a backend."""
    failure = EliminationFailure(
        kind=FailureKind.DIMENSION_MISMATCH,
        row=None,
        message=str(error),
        shape=error.shape,
    )
    return Result(
        params=failure,
        info={'method': 'gauss', 'expected_shape': error.expected},
        timing=None,
        backend_name='validation',
    )
