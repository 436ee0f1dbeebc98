"""Matrix addition and multiplication on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


class MatrixShapeError(ValueError):
    """Raised when matrices have shapes that do not fit the operation."""


def _shape(matrix: Matrix, name: str) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise MatrixShapeError(f"{name} matrix has rows of different lengths")
    return rows, cols


def multiply(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the matrix product ``first x second``."""
    rows1, cols1 = _shape(first, "first")
    rows2, cols2 = _shape(second, "second")
    if cols1 != rows2:
        raise MatrixShapeError(
            f"cannot multiply a {rows1}x{cols1} matrix by a {rows2}x{cols2} matrix"
        )
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def add(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    shape1 = _shape(first, "first")
    shape2 = _shape(second, "second")
    if shape1 != shape2:
        raise MatrixShapeError(
            f"cannot add a {shape1[0]}x{shape1[1]} matrix "
            f"to a {shape2[0]}x{shape2[1]} matrix"
        )
    return [[a + b for a, b in zip(row1, row2)] for row1, row2 in zip(first, second)]


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix as lines of space-separated values."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)