"""Matrix row/column sums and multiplication."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


class DimensionError(ValueError):
    """Raised when matrix shapes do not allow an operation."""


def _column_count(matrix: Matrix) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise DimensionError("Matrix rows must all have the same length")
    return widths.pop() if widths else 0


def row_sums(matrix: Matrix) -> list[int]:
    """Return the sum of each row."""
    _column_count(matrix)
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list[int]:
    """Return the sum of each column."""
    _column_count(matrix)
    return [sum(column) for column in zip(*matrix)]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product ``a`` × ``b``."""
    inner = _column_count(a)
    _column_count(b)
    if a and inner != len(b):
        raise DimensionError(
            "Matrix multiplication not possible! (Columns of A must equal Rows of B)"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]