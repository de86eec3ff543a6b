"""Conversion between 81-character puzzle lines and grids."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

from .backtracking import InvalidGridError
from .board import SIZE, Grid

CELL_COUNT = SIZE * SIZE
_DIGITS = "123456789"


def parse_puzzle(line: str) -> Grid:
    """
    Parse a row-major 81-character puzzle line.

    Characters '1'-'9' become that digit; anything else ('.', '0', '_', ...)
    is an empty cell.

    Raises:
        InvalidGridError: if the stripped line is not 81 characters long
    """
    text = line.strip()
    if len(text) != CELL_COUNT:
        raise InvalidGridError(
            f"Puzzle line must have {CELL_COUNT} characters, got {len(text)}"
        )

    values = [int(ch) if ch in _DIGITS else 0 for ch in text]
    return [values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


def format_puzzle(grid: Grid, empty: str = ".") -> str:
    """Render a grid back to a single 81-character line."""
    return "".join(str(cell) if cell else empty for row in grid for cell in row)


def format_grid(grid: Grid) -> str:
    """Render a grid as nine text rows with box separators."""
    lines = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        chunks = [
            " ".join(str(cell) if cell else "." for cell in row[c:c + 3])
            for c in range(0, SIZE, 3)
        ]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def read_puzzles(path: Union[str, Path]) -> Iterator[Grid]:
    """Yield one grid per non-blank line of a puzzle file."""
    with open(path, "r", encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield parse_puzzle(line)
