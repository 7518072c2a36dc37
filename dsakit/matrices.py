"""Operations on matrices represented as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _require_rectangular(matrix: Sequence[Sequence[int]]) -> None:
    if matrix and any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("matrix rows must all have the same length")


def max_ones_row(matrix: Sequence[Sequence[int]]) -> int:
    """Return the index of the row holding the most ones.

    Each row is expected to be sorted, zeros before ones. Ties go to the
    earliest row; -1 is returned when no row contains a one.
    """
    if not matrix:
        return -1
    width = len(matrix[0])
    best_row = -1
    best_count: int | None = None
    for index, row in enumerate(matrix):
        first_one = next((j for j, cell in enumerate(row) if cell == 1), None)
        if first_one is None:
            continue
        count = width - first_one
        if best_count is None or count > best_count:
            best_count = count
            best_row = index
    return best_row


def rotate_90(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a square matrix rotated a quarter turn clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("only square matrices can be rotated")
    return [list(column)[::-1] for column in zip(*matrix)]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product of ``a`` and ``b``."""
    _require_rectangular(a)
    _require_rectangular(b)
    if any(len(row) != len(b) for row in a):
        raise ValueError("Matrices cannot be multiplied.")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    _require_rectangular(matrix)
    return [list(column) for column in zip(*matrix)]


def rectangle_sum(
    matrix: Sequence[Sequence[int]], top: int, left: int, bottom: int, right: int
) -> int:
    """Sum the cells of the rectangle spanning rows top..bottom and columns left..right, inclusive."""
    if top > bottom or left > right:
        return 0
    if top < 0 or bottom >= len(matrix):
        raise IndexError("row range outside the matrix")
    rows = matrix[top : bottom + 1]
    if left < 0 or any(right >= len(row) for row in rows):
        raise IndexError("column range outside the matrix")
    return sum(sum(row[left : right + 1]) for row in rows)