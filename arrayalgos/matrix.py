"""Spiral traversal, clockwise rotation and zero propagation on integer matrices."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _copy(matrix: Sequence[Sequence[int]]) -> Matrix:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the values read clockwise in a spiral from the top-left corner."""
    grid = _copy(matrix)
    if not grid:
        return []
    order: list[int] = []
    top, bottom = 0, len(grid) - 1
    left, right = 0, len(grid[0]) - 1
    while left <= right and top <= bottom:
        order.extend(grid[top][left:right + 1])
        top += 1
        order.extend(grid[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(reversed(grid[bottom][left:right + 1]))
            bottom -= 1
        if left <= right:
            order.extend(grid[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return order


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a square matrix turned 90 degrees clockwise."""
    grid = _copy(matrix)
    if grid and len(grid) != len(grid[0]):
        raise ValueError("only square matrices can be rotated")
    return [list(column) for column in zip(*reversed(grid))]


def set_zeroes_better(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy where every row and column holding a zero is all zeros.

    Zero positions are recorded first, then their rows and columns are cleared.
    """
    grid = _copy(matrix)
    zeros = [
        (i, j)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
        if value == 0
    ]
    for i, j in zeros:
        grid[i] = [0] * len(grid[i])
        for row in grid:
            row[j] = 0
    return grid


def set_zeroes_optimal(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy where every row and column holding a zero is all zeros.

    The first row and column serve as markers, with one flag for column 0.
    """
    grid = _copy(matrix)
    if not grid:
        return grid
    rows, cols = len(grid), len(grid[0])
    first_col_zero = False
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] == 0:
                grid[i][0] = 0
                if j:
                    grid[0][j] = 0
                else:
                    first_col_zero = True
    for i in range(1, rows):
        for j in range(1, cols):
            if grid[0][j] == 0 or grid[i][0] == 0:
                grid[i][j] = 0
    if grid[0][0] == 0:
        grid[0] = [0] * cols
    if first_col_zero:
        for row in grid:
            row[0] = 0
    return grid