"""
Back-substitution solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from gaussolve.core.result import Result
from gaussolve.core.display import format_vector


@dataclass(frozen=True)
class SubstitutionParams:
    """Parameter payload for back-substitution: the solution x."""
    x: NDArray[np.floating[Any]]


@dataclass
class SolutionVector:
    """
    Solution x of an upper-triangular system, one value per unknown.

    Behaves like a read-only sequence of floats (len, indexing,
    iteration) and converts with numpy.asarray(). The underlying array
    belongs to the caller.
    """
    _result: Result[SubstitutionParams]

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    def tolist(self) -> list[float]:
        return self.values.tolist()

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values.tolist())

    def __array__(self, dtype=None, copy=None):
        arr = self.values if dtype is None else self.values.astype(dtype)
        return arr.copy() if copy else arr

    def residual(self, A: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
        """b - A @ x for the original (unreduced) system."""
        A_arr = np.asarray(A, dtype=self.values.dtype)
        b_arr = np.asarray(b, dtype=self.values.dtype).ravel()
        return b_arr - A_arr @ self.values

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
        lines = [
            "Back-substitution",
            "=" * 60,
            f"Unknowns: {len(self)}",
            "-" * 60,
            format_vector(self.values),
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SolutionVector({self.values.tolist()!r})"
