"""Multiplication of matrices given as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["MatrixShapeError", "multiply_matrices"]

Matrix = Sequence[Sequence[float]]


class MatrixShapeError(ValueError):
    """Raised when matrices are ragged or their shapes do not allow multiplication."""


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise MatrixShapeError("all rows of a matrix must have the same length")
    return rows, columns


def multiply_matrices(first: Matrix, second: Matrix) -> list[list[float]]:
    """Return the product of an r1 x c1 and an r2 x c2 matrix, requiring c1 == r2."""
    _, first_columns = _shape(first)
    second_rows, _ = _shape(second)
    if first_columns != second_rows:
        raise MatrixShapeError(
            f"cannot multiply: first matrix has {first_columns} columns, "
            f"second has {second_rows} rows"
        )
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in first]