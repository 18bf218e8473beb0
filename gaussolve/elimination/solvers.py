"""
Solver dispatch for Gaussian elimination.

This module provides the eliminate() function (public API) and backend
selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from gaussolve.core.exceptions import DimensionError
from gaussolve.core.validation import check_tolerance
from gaussolve.core.compute.device import select_device
from gaussolve.elimination.design import AugmentedSystem
from gaussolve.elimination.solution import EliminationSolution
from gaussolve.elimination.backends.cpu import CPUGaussBackend, Pivoting
from gaussolve.elimination._common import dimension_failure


BackendChoice = Literal['auto', 'cpu', 'gpu']


def eliminate(
    matrix: ArrayLike | AugmentedSystem,
    tolerance: float | None = None,
    *,
    pivoting: Pivoting = 'partial',
    scale_tolerance: bool = True,
    copy: bool = False,
    backend: BackendChoice = 'auto',
) -> EliminationSolution:
    """
    Reduce an augmented matrix [A | b] to row-echelon form.

    The matrix is borrowed and mutated in place: a floating ndarray is
    overwritten with its echelon form, and a list of row lists has its
    rows rewritten. Pass copy=True to leave the caller's matrix untouched.

    Numerical and shape failures are returned, not raised: inspect
    `result.succeeded` / `result.failure`, or call
    `result.raise_for_failure()`.

    Args:
        matrix: N x (N+1) augmented matrix, or an AugmentedSystem
        tolerance: Pivot tolerance (> 0). None selects the default for the
            matrix dtype (1e-12 for float64).
        pivoting: 'partial' (row with largest |pivot| each stage) or 'none'
        scale_tolerance: If True, the tolerance is relative to the
            infinity norm of A; otherwise it is an absolute threshold.
        copy: Work on a private copy instead of the caller's matrix
        backend: 'auto' / 'cpu' for the NumPy reference, 'gpu' for PyTorch

    Returns:
        EliminationSolution: success (echelon matrix, determinant, swap
        count) or failure (DIMENSION_MISMATCH, SINGULAR, NEAR_SINGULAR)

    Raises:
        ValidationError: If the matrix is non-numeric or non-finite, or the
            tolerance is not a positive number
        ValueError: If pivoting or backend is unknown

    Example:
        >>> W = np.array([[8., 1., 6., 1.], [3., 5., 7., 4.], [4., 9., 2., 2.]])
        >>> result = eliminate(W)
        >>> round(result.determinant, 9)
        -360.0
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    tol = check_tolerance(tolerance) if tolerance is not None else None
    if pivoting not in ('partial', 'none'):
        raise ValueError(f"Unknown pivoting: {pivoting!r}. Use 'partial' or 'none'.")

    # === Construct Design ===
    if isinstance(matrix, AugmentedSystem):
        design = matrix.copy() if copy else matrix
    else:
        try:
            design = AugmentedSystem.from_matrix(matrix, copy=copy)
        except DimensionError as e:
            return EliminationSolution(_result=dimension_failure(e), _design=None)

    # === Select Backend ===
    backend_impl = _get_backend(backend, pivoting, tol, scale_tolerance)

    # === Solve ===
    result = backend_impl.solve(design)
    design.write_back()

    return EliminationSolution(_result=result, _design=design)


def _get_backend(
    choice: BackendChoice,
    pivoting: Pivoting,
    tolerance: float | None,
    scale_tolerance: bool,
):
    """
    Select and instantiate the appropriate backend.

    'auto' always resolves to the CPU: small dense systems gain nothing
    from a device round trip, and the CPU keeps the caller's precision.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice not in ('auto', 'cpu', 'gpu'):
        raise ValueError(f"Unknown backend: {choice!r}")

    device = select_device('gpu' if choice == 'gpu' else 'cpu')
    if device.is_gpu:
        from gaussolve.elimination.backends.gpu import GPUGaussBackend
        return GPUGaussBackend(pivoting, tolerance, scale_tolerance, device=device.device_type)

    return CPUGaussBackend(pivoting, tolerance, scale_tolerance)
