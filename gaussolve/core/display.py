"""
Human-readable rendering of matrices and vectors.

Pure consumers: every function here reads its argument and never
mutates it. Matrices are printed the way they would be written on
paper, one labelled row per line:

    Row 0  8.000000 1.000000 6.000000 1.000000
    Row 1  3.000000 5.000000 7.000000 4.000000
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import numpy as np
from numpy.typing import ArrayLike


def _format_value(value: Any, precision: int) -> str:
    return f"{float(value):.{precision}f}"


def format_matrix(matrix: ArrayLike, precision: int = 6) -> str:
    """
    Render a 2D matrix as labelled rows.

    Args:
        matrix: 2D array or list of row sequences
        precision: Digits after the decimal point

    Returns:
        Text with one 'Row i  ...' line per row
    """
    rows = matrix.tolist() if isinstance(matrix, np.ndarray) else matrix
    lines = []
    for i, row in enumerate(rows):
        values = " ".join(_format_value(v, precision) for v in row)
        lines.append(f"Row {i}  {values}")
    return "\n".join(lines)


def format_vector(vector: ArrayLike, precision: int = 6, name: str = 'x') -> str:
    """Render a solution vector as 'x[i] = value' lines."""
    values = np.asarray(vector).ravel().tolist()
    return "\n".join(
        f"{name}[{i}] = {_format_value(v, precision)}" for i, v in enumerate(values)
    )


def print_matrix(
    matrix: ArrayLike,
    precision: int = 6,
    file: TextIO | None = None,
) -> None:
    """Write format_matrix() output followed by a blank line."""
    stream = file if file is not None else sys.stdout
    stream.write(format_matrix(matrix, precision) + "\n\n")
