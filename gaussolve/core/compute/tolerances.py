"""
Tolerance tiers for pivot rejection and numerical validation.

Two kinds of tolerance live here:
- Pivot tolerances: the default relative threshold below which a pivot
  is treated as numerically zero, per working precision.
- Comparison tiers: precision expectations for different compute paths
  (CPU FP64 reference, GPU FP64, GPU/MPS FP32), used by the test suite
  to compare solutions against a LAPACK reference.
"""

from dataclasses import dataclass

import numpy as np

from gaussolve.core.compute.precision import is_single_precision


# Relative pivot tolerance in double precision
DEFAULT_PIVOT_TOLERANCE_FP64 = 1e-12

# Relative pivot tolerance in single precision
DEFAULT_PIVOT_TOLERANCE_FP32 = 1e-6

# min|pivot| / max|pivot| below which a successful elimination is flagged
# as ill-conditioned in Result.warnings.
ILL_CONDITIONED_PIVOT_RATIO = 1e-8


def default_pivot_tolerance(dtype: np.dtype | type = np.float64) -> float:
    """Default relative pivot tolerance for a working dtype."""
    if is_single_precision(dtype):
        return DEFAULT_PIVOT_TOLERANCE_FP32
    return DEFAULT_PIVOT_TOLERANCE_FP64


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: must match LAPACK to near machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches LAPACK getrf/getrs',
)

# CPU reference, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# GPU with FP64 (CUDA)
GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

# Single precision (float32 input on CPU, MPS)
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision elimination',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate comparison tier for a given backend."""
    if 'fp32' in backend_name:
        return FP32
    if 'gpu' in backend_name:
        return GPU_FP64
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
