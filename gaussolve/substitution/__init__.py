"""
Back-substitution.

Recovers the solution vector from an echelon-form augmented system,
normally the output of gaussolve.elimination.eliminate().

Public API:
    solve(system, tolerance=None) -> SolutionVector
"""

from gaussolve.substitution.solution import SolutionVector, SubstitutionParams
from gaussolve.substitution.solvers import solve, check_echelon

__all__ = [
    "solve",
    "check_echelon",
    "SolutionVector",
    "SubstitutionParams",
]
