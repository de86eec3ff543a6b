"""Bitmask board state for the backtracking solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

Grid = List[List[int]]
Cell = Tuple[int, int]

SIZE = 9
ALL_DIGITS = (1 << SIZE) - 1


def box_index(row: int, col: int) -> int:
    """Index (0-8) of the 3x3 box containing (row, col)."""
    return (row // 3) * 3 + (col // 3)


def digit_bit(value: int) -> int:
    return 1 << (value - 1)


@dataclass
class Board:
    """
    Snapshot of a partially filled grid.

    Each of ``row_contains``, ``col_contains`` and ``box_contains`` holds one
    9-bit mask per group; bit ``v - 1`` is set when digit ``v`` is already
    placed in that group. ``empty_cells`` lists the zero cells in row-major
    order and is always consumed from the end.

    Boards are never modified once built: ``commit`` returns a new board.
    """

    grid: Grid
    row_contains: List[int] = field(default_factory=lambda: [0] * SIZE)
    col_contains: List[int] = field(default_factory=lambda: [0] * SIZE)
    box_contains: List[int] = field(default_factory=lambda: [0] * SIZE)
    empty_cells: List[Cell] = field(default_factory=list)
    consistent: bool = True

    @classmethod
    def from_grid(cls, grid: Grid) -> "Board":
        """Scan a raw grid and derive occupancy masks and the empty-cell list."""
        board = cls(grid=[list(row) for row in grid])

        for row in range(SIZE):
            for col in range(SIZE):
                value = board.grid[row][col]
                if value == 0:
                    board.empty_cells.append((row, col))
                    continue

                bit = digit_bit(value)
                box = box_index(row, col)
                if (
                    board.row_contains[row] & bit
                    or board.col_contains[col] & bit
                    or board.box_contains[box] & bit
                ):
                    board.consistent = False
                board.row_contains[row] |= bit
                board.col_contains[col] |= bit
                board.box_contains[box] |= bit

        return board

    @property
    def is_solved(self) -> bool:
        return not self.empty_cells

    def _invalid_mask(self, row: int, col: int) -> int:
        return (
            self.row_contains[row]
            | self.col_contains[col]
            | self.box_contains[box_index(row, col)]
        )

    def valid_moves(self, row: int, col: int) -> Iterator[int]:
        """Yield, in ascending order, every digit not yet used by the cell's groups."""
        invalid = self._invalid_mask(row, col)
        for value in range(1, SIZE + 1):
            if not invalid & digit_bit(value):
                yield value

    def candidate_count(self, row: int, col: int) -> int:
        return bin(~self._invalid_mask(row, col) & ALL_DIGITS).count("1")

    def commit(self, row: int, col: int, value: int) -> "Board":
        """
        Return a new board with ``value`` placed at (row, col).

        The caller must pass a digit produced by ``valid_moves`` and the cell
        at the end of ``empty_cells``; neither is re-checked here.
        """
        bit = digit_bit(value)
        box = box_index(row, col)

        grid = [list(r) for r in self.grid]
        grid[row][col] = value
        row_contains = list(self.row_contains)
        col_contains = list(self.col_contains)
        box_contains = list(self.box_contains)
        row_contains[row] |= bit
        col_contains[col] |= bit
        box_contains[box] |= bit

        return Board(
            grid=grid,
            row_contains=row_contains,
            col_contains=col_contains,
            box_contains=box_contains,
            empty_cells=self.empty_cells[:-1],
            consistent=self.consistent,
        )

    def with_last_empty(self, index: int) -> "Board":
        """Return a copy whose empty cell at ``index`` is moved to the end of the list."""
        empty_cells = list(self.empty_cells)
        empty_cells[index], empty_cells[-1] = empty_cells[-1], empty_cells[index]
        return Board(
            grid=self.grid,
            row_contains=self.row_contains,
            col_contains=self.col_contains,
            box_contains=self.box_contains,
            empty_cells=empty_cells,
            consistent=self.consistent,
        )
