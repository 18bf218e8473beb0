"""
GPU backend for Gaussian elimination using PyTorch.

Same stage loop as the CPU reference, with each stage's rank-1 row
update running as one device kernel. Worth it for large N only: the
pivot magnitude is read back to the host once per stage.

Supports CUDA (float64) and MPS (float32 only, Apple Silicon).
"""

import warnings
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


class GPUGaussBackend:
    """
    GPU backend for Gaussian elimination.

    The matrix is copied to the device, reduced there, and copied back
    into design.matrix, so the caller sees the same in-place contract as
    on CPU.
    """

    def __init__(
        self,
        pivoting: Literal['partial', 'none'] = 'partial',
        tolerance: float | None = None,
        scale_tolerance: bool = True,
        device: str = 'cuda',
    ):
        """
        Args:
            pivoting: 'partial' or 'none'
            tolerance: Relative (or absolute, see scale_tolerance) pivot
                tolerance; None picks the default for the device precision
            scale_tolerance: Scale tolerance by the coefficient norm
            device: 'cuda', 'cuda:N' or 'mps'
        """
        import torch

        if pivoting not in ('partial', 'none'):
            raise ValueError(f"Unknown pivoting: {pivoting!r}. Use 'partial' or 'none'.")

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
            self.device = torch.device(device)
            self.use_fp64 = True
        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            self.device = torch.device('mps')
            self.use_fp64 = False
        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

        self.pivoting = pivoting
        self.tolerance = tolerance
        self.scale_tolerance = scale_tolerance

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_gauss_{self.pivoting}_{precision}'

    def solve(self, design: AugmentedSystem) -> Result[EliminationParams | EliminationFailure]:
        """
        Reduce design.matrix to row-echelon form on the GPU.

        Returns:
            Result with EliminationParams or EliminationFailure; in both
            cases design.matrix holds the device's final state
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        W_host = design.matrix
        n = design.n
        run_warnings: tuple[str, ...] = ()

        if self.use_fp64:
            dtype = torch.float64 if W_host.dtype == np.float64 else torch.float32
        else:
            dtype = torch.float32
            if W_host.dtype != np.float32:
                msg = (
                    f"MPS has no float64; eliminating {W_host.dtype} input in float32, "
                    f"so the echelon form written back carries float32 rounding"
                )
                warnings.warn(msg)
                run_warnings = (msg,)

        work_dtype = np.float64 if dtype == torch.float64 else np.float32
        tolerance = self.tolerance if self.tolerance is not None else default_pivot_tolerance(work_dtype)
        threshold = pivot_threshold(tolerance, design.scaled_norm, self.scale_tolerance)
        info = base_info(design, self.pivoting, tolerance, threshold, work_dtype)

        with timer.section('data_transfer_to_gpu'):
            W = torch.from_numpy(np.ascontiguousarray(W_host)).to(dtype=dtype).to(self.device)
            L = torch.eye(n, device=self.device, dtype=dtype)
            perm = torch.arange(n, device=self.device)

        pivots: list[PivotRecord] = []
        n_swaps = 0
        failure = None

        for i in range(n):
            with timer.section('pivot_search'):
                if self.pivoting == 'partial':
                    p = i + int(torch.argmax(torch.abs(W[i:, i])).item())
                else:
                    p = i
                magnitude = float(torch.abs(W[p, i]).item())

            pivots.append(PivotRecord(stage=i, row=p, magnitude=magnitude))
            failure = classify_pivot(i, magnitude, threshold)
            if failure is not None:
                break

            if p != i:
                idx = torch.tensor([p, i], device=self.device)
                W[[i, p]] = W[idx]
                L[[i, p], :i] = L[idx, :i]
                perm[[i, p]] = perm[idx]
                n_swaps += 1

            if i < n - 1:
                with timer.section('row_reduction'):
                    m = W[i + 1:, i] / W[i, i]
                    W[i + 1:, i + 1:] -= torch.outer(m, W[i, i + 1:])
                    W[i + 1:, i] = 0.0
                    L[i + 1:, i] = m

        with timer.section('data_transfer_from_gpu'):
            W_host[...] = W.cpu().numpy()
            L_host = L.cpu().numpy().astype(W_host.dtype)
            perm_host = perm.cpu().numpy().astype(np.intp)

        timer.stop()

        if failure is not None:
            return failure_result(
                failure,
                pivots=pivots,
                n_swaps=n_swaps,
                info=info,
                timing=timer.result(),
                backend_name=self.name,
                warnings=run_warnings,
            )

        return success_result(
            design,
            pivots=pivots,
            multipliers=L_host,
            permutation=perm_host,
            n_swaps=n_swaps,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=run_warnings,
        )
