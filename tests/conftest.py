"""Shared puzzles for solver tests."""

import pytest

CLASSIC_LINE = (
    "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
)

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def _classic_grid() -> list[list[int]]:
    return [[int(ch) for ch in CLASSIC_LINE[r * 9:(r + 1) * 9]] for r in range(9)]


@pytest.fixture
def classic_grid() -> list[list[int]]:
    return _classic_grid()


@pytest.fixture
def classic_solution() -> list[list[int]]:
    return [list(row) for row in CLASSIC_SOLUTION]


@pytest.fixture
def dead_end_grid() -> list[list[int]]:
    """Consistent givens, but the bottom-right cell has no legal digit."""
    grid = [[0] * 9 for _ in range(9)]
    grid[8] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[0][8] = 9
    return grid


def assert_valid_solution(grid: list[list[int]]) -> None:
    digits = set(range(1, 10))
    for i in range(9):
        assert set(grid[i]) == digits
        assert {grid[r][i] for r in range(9)} == digits
    for box in range(9):
        r0, c0 = (box // 3) * 3, (box % 3) * 3
        assert {grid[r][c] for r in range(r0, r0 + 3) for c in range(c0, c0 + 3)} == digits


@pytest.fixture
def classic_line() -> str:
    return CLASSIC_LINE


@pytest.fixture
def dead_end_line() -> str:
    """Line form of ``dead_end_grid``."""
    return "." * 8 + "9" + "." * 63 + "12345678."


@pytest.fixture
def check_solution():
    """Assert that every row, column and box holds 1-9 exactly once."""
    return assert_valid_solution
