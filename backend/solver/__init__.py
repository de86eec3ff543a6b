"""Solver module exports."""

from .backtracking import InvalidGridError, SudokuSolver, is_valid_grid, solve, validate_grid
from .board import Board, box_index

__all__ = [
    "Board",
    "InvalidGridError",
    "SudokuSolver",
    "box_index",
    "is_valid_grid",
    "solve",
    "validate_grid",
]
