"""
Back-substitution backends.

Available backends:
    CPUBackSubstitutionBackend: NumPy row-by-row solve
"""

from gaussolve.substitution.backends.cpu import CPUBackSubstitutionBackend

__all__ = [
    "CPUBackSubstitutionBackend",
]
