"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": [
                [5, 3, 0, 0, 7, 0, 0, 0, 0],
                [6, 0, 0, 1, 9, 5, 0, 0, 0],
                [0, 9, 8, 0, 0, 0, 0, 6, 0],
                [8, 0, 0, 0, 6, 0, 0, 0, 3],
                [4, 0, 0, 8, 0, 3, 0, 0, 1],
                [7, 0, 0, 0, 2, 0, 0, 0, 6],
                [0, 6, 0, 0, 0, 0, 2, 8, 0],
                [0, 0, 0, 4, 1, 9, 0, 0, 5],
                [0, 0, 0, 0, 8, 0, 0, 7, 9],
            ]
        }


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveTextRequest(BaseModel):
    """Request to solve a puzzle given as one 81-character line."""

    puzzle: str = Field(
        description="Row-major puzzle, '1'-'9' for givens, any other character empty",
        examples=[
            "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
        ],
    )


class BatchSolveRequest(BaseModel):
    """Request to solve several 81-character puzzles."""

    puzzles: list[str] = Field(description="Puzzle lines, one per puzzle")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")
    elapsed_ms: float | None = Field(
        default=None, description="Solver wall-clock time in milliseconds"
    )
    steps: int | None = Field(
        default=None, description="Number of digits committed during the search"
    )


class BatchItem(BaseModel):
    """Outcome of one puzzle in a batch."""

    index: int = Field(description="Position of the puzzle in the request")
    solved: bool = Field(description="Whether the puzzle was solved")
    solution: str | None = Field(description="Solved puzzle as an 81-character line")
    elapsed_ms: float = Field(description="Solve time in milliseconds")
    steps: int = Field(description="Number of digits committed during the search")


class BatchStatsInfo(BaseModel):
    """Aggregate timing over a batch."""

    count: int = Field(description="Number of puzzles")
    solved: int = Field(description="Number of solved puzzles")
    unsolved: int = Field(description="Number of puzzles without a solution")
    total_ms: float = Field(description="Sum of solve times")
    average_ms: float = Field(description="Average solve time")
    max_ms: float = Field(description="Slowest solve time")
    min_ms: float = Field(description="Fastest solve time")


class BatchSolveResponse(BaseModel):
    """Response from solving a batch of puzzles."""

    results: list[BatchItem] = Field(description="Per-puzzle results, in input order")
    stats: BatchStatsInfo = Field(description="Aggregate statistics")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(description="Error message")
    detail: str | None = Field(description="Detailed error information")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    solver_strategy: str = Field(description="Cell selection strategy in use")
