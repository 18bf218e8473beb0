"""
Elimination backends.

Available backends:
    CPUGaussBackend: CPU reference implementation (NumPy, in place)
    GPUGaussBackend: PyTorch implementation for CUDA / MPS (imported lazily)
"""

from gaussolve.elimination.backends.cpu import CPUGaussBackend

__all__ = [
    "CPUGaussBackend",
]
