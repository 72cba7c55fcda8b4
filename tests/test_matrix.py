import pytest
from hypothesis import given
from hypothesis import strategies as st

from arrayalgos.matrix import (
    rotate_clockwise,
    set_zeroes_better,
    set_zeroes_optimal,
    spiral_order,
)


@st.composite
def matrices(draw, square=False, low=-3, high=3):
    rows = draw(st.integers(min_value=1, max_value=5))
    cols = rows if square else draw(st.integers(min_value=1, max_value=5))
    cell = st.integers(min_value=low, max_value=high)
    return [draw(st.lists(cell, min_size=cols, max_size=cols)) for _ in range(rows)]


def test_spiral_worked_example():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(grid) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_single_column_reads_downwards():
    assert spiral_order([[4], [7], [1]]) == [4, 7, 1]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])


@given(matrices())
def test_spiral_visits_every_cell_once(grid):
    order = spiral_order(grid)
    assert sorted(order) == sorted(v for row in grid for v in row)
    assert order[: len(grid[0])] == grid[0]


def test_rotate_worked_example():
    assert rotate_clockwise([[1, 2], [3, 4]]) == [[3, 1], [4, 2]]


def test_rotate_non_square_rejected():
    with pytest.raises(ValueError):
        rotate_clockwise([[1, 2, 3], [4, 5, 6]])


@given(matrices(square=True))
def test_rotate_four_times_is_identity(grid):
    result = grid
    for _ in range(4):
        result = rotate_clockwise(result)
    assert result == grid


@given(matrices(square=True))
def test_rotate_first_row_is_reversed_first_column(grid):
    rotated = rotate_clockwise(grid)
    assert rotated[0] == [row[0] for row in reversed(grid)]


def test_set_zeroes_worked_example():
    grid = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    assert set_zeroes_optimal(grid) == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


@pytest.mark.parametrize("func", [set_zeroes_better, set_zeroes_optimal])
def test_set_zeroes_without_zeros_unchanged(func):
    grid = [[1, 2], [3, 4], [5, 6]]
    assert func(grid) == grid


@pytest.mark.parametrize("func", [set_zeroes_better, set_zeroes_optimal])
def test_set_zeroes_does_not_mutate_input(func):
    grid = [[0, 2], [3, 4]]
    func(grid)
    assert grid == [[0, 2], [3, 4]]


@given(matrices(low=0, high=2))
def test_set_zeroes_variants_agree(grid):
    assert set_zeroes_better(grid) == set_zeroes_optimal(grid)


@given(matrices(low=0, high=2))
def test_set_zeroes_cells_follow_rows_and_columns(grid):
    result = set_zeroes_optimal(grid)
    zero_rows = {i for i, row in enumerate(grid) if 0 in row}
    zero_cols = {j for j in range(len(grid[0])) if any(row[j] == 0 for row in grid)}
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == grid[i][j]