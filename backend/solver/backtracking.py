"""Sudoku solver using bitmask-guided backtracking."""

from __future__ import annotations

import logging
import time
from typing import Optional

from .board import SIZE, Board, Grid

_LOGGER = logging.getLogger(__name__)

STRATEGIES = ("last", "mrv")


def normalize_strategy(name: str) -> Optional[str]:
    """Return the canonical strategy name, or None when ``name`` is not one."""
    strategy = name.strip().lower()
    if strategy in STRATEGIES:
        return strategy
    return None


class InvalidGridError(ValueError):
    """Raised when a grid does not have the 9x9 shape or holds values outside 0-9."""


def validate_grid(grid: Grid) -> None:
    """
    Check the grid structure before it reaches the solver.

    Args:
        grid: 9x9 list of lists with 0 for empty cells

    Raises:
        InvalidGridError: if the shape or any cell value is wrong
    """
    if not isinstance(grid, list) or len(grid) != SIZE:
        raise InvalidGridError(f"Grid must be a list of {SIZE} rows")

    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != SIZE:
            raise InvalidGridError(f"Row {r} must be a list of {SIZE} cells")
        for c, cell in enumerate(row):
            if isinstance(cell, bool) or not isinstance(cell, int):
                raise InvalidGridError(f"Cell ({r}, {c}) is not an integer: {cell!r}")
            if cell < 0 or cell > SIZE:
                raise InvalidGridError(f"Cell ({r}, {c}) is out of range 0-9: {cell}")


class SudokuSolver:
    """Solves Sudoku puzzles by depth-first search over board snapshots."""

    def __init__(self, strategy: str = "last"):
        if strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy {strategy!r}, expected one of {', '.join(STRATEGIES)}"
            )
        self.strategy = strategy
        self.steps = 0

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a Sudoku puzzle.

        Args:
            grid: 9x9 list of lists with 0 for empty cells

        Returns:
            Solved 9x9 grid if solution exists, None otherwise

        Raises:
            InvalidGridError: if the grid is malformed
        """
        validate_grid(grid)
        self.steps = 0

        board = Board.from_grid(grid)
        if not board.consistent:
            _LOGGER.debug("Givens conflict, puzzle has no solution")
            return None

        start = time.perf_counter()
        solved = self._solve_recursive(board)
        _LOGGER.debug(
            "Search finished: solved=%s steps=%d elapsed=%.6fs",
            solved is not None,
            self.steps,
            time.perf_counter() - start,
        )

        if solved is None:
            return None
        return solved.grid

    def _solve_recursive(self, board: Board) -> Optional[Board]:
        """Try every legal digit for the next cell; the first completed board wins."""
        if board.is_solved:
            return board

        if self.strategy == "mrv":
            board = board.with_last_empty(self._most_constrained(board))

        row, col = board.empty_cells[-1]

        for value in board.valid_moves(row, col):
            self.steps += 1
            solved = self._solve_recursive(board.commit(row, col, value))
            if solved is not None:
                return solved

        return None

    @staticmethod
    def _most_constrained(board: Board) -> int:
        """Index in ``empty_cells`` of the cell with the fewest candidates (latest wins ties)."""
        best_index = len(board.empty_cells) - 1
        best_count = SIZE + 1

        for index in range(len(board.empty_cells) - 1, -1, -1):
            row, col = board.empty_cells[index]
            count = board.candidate_count(row, col)
            if count < best_count:
                best_index, best_count = index, count
                if count <= 1:
                    break

        return best_index


def solve(grid: Grid, strategy: str = "last") -> Optional[Grid]:
    """Convenience function to solve a Sudoku grid."""
    solver = SudokuSolver(strategy)
    return solver.solve(grid)


def is_valid_grid(grid: Grid) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        grid: 9x9 grid to validate

    Returns:
        True if grid is valid, False otherwise
    """
    try:
        validate_grid(grid)
    except InvalidGridError:
        return False

    # No duplicate values in rows, cols, boxes
    return Board.from_grid(grid).consistent
