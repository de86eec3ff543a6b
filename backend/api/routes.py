"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from ..models.schemas import (
    BatchItem,
    BatchSolveRequest,
    BatchSolveResponse,
    BatchStatsInfo,
    ErrorResponse,
    HealthResponse,
    SolveRequest,
    SolveResponse,
    SolveTextRequest,
)
from ..solver.backtracking import (
    STRATEGIES,
    InvalidGridError,
    is_valid_grid,
    normalize_strategy,
)
from ..solver.batch import run_batch, summarize, time_solve
from ..solver.board import Grid
from ..solver.parsing import format_puzzle, parse_puzzle

router = APIRouter()
_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float, str)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _get_solver_strategy() -> tuple[str | None, str | None]:
    raw = _env("SOLVER_STRATEGY", "last")
    strategy = normalize_strategy(raw)
    if strategy is not None:
        return strategy, None
    return None, (
        f"Unsupported SOLVER_STRATEGY={raw!r}, expected one of {', '.join(STRATEGIES)}"
    )


def _resolve_strategy() -> str:
    strategy, error = _get_solver_strategy()
    if strategy is None:
        _LOGGER.warning("%s, fallback to last", error)
        return "last"
    return strategy


def _solve_grid(grid: Grid) -> SolveResponse:
    """Solve a parsed grid and build the shared response."""
    if not is_valid_grid(grid):
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Invalid Sudoku grid format",
        )

    timing = time_solve(grid, strategy=_resolve_strategy())
    elapsed_ms = timing.elapsed * 1000.0

    if not timing.solved:
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Puzzle has no solution",
            elapsed_ms=elapsed_ms,
            steps=timing.steps,
        )

    return SolveResponse(
        success=True,
        original=grid,
        solved=timing.solution,
        message="Puzzle solved successfully",
        elapsed_ms=elapsed_ms,
        steps=timing.steps,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", solver_strategy=_resolve_strategy())


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
async def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    try:
        return _solve_grid(request.grid.cells)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/sudoku:solveText",
    response_model=SolveResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["Sudoku"],
)
async def solve_sudoku_text(request: SolveTextRequest):
    """
    Solve a Sudoku puzzle given as an 81-character line.

    Digits '1'-'9' are givens; every other character ('.', '0', ...) is empty.
    """
    try:
        grid = parse_puzzle(request.puzzle)
    except InvalidGridError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return _solve_grid(grid)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/sudoku:solveBatch",
    response_model=BatchSolveResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
    tags=["Sudoku"],
)
def solve_sudoku_batch(request: BatchSolveRequest):
    """
    Solve several 81-character puzzles and report per-puzzle and aggregate timings.

    Sync handler: FastAPI runs it in its threadpool, off the event loop.
    """
    max_batch = _env("SUDOKU_MAX_BATCH", 1000)
    if len(request.puzzles) > max_batch:
        raise HTTPException(
            status_code=413,
            detail=f"Batch has {len(request.puzzles)} puzzles, limit is {max_batch}",
        )

    try:
        grids = [parse_puzzle(line) for line in request.puzzles]
    except InvalidGridError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        timings = run_batch(
            grids,
            workers=_env("SUDOKU_BATCH_WORKERS", 1),
            strategy=_resolve_strategy(),
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    timings.sort(key=lambda t: t.index)
    stats = summarize(timings)

    return BatchSolveResponse(
        results=[
            BatchItem(
                index=t.index,
                solved=t.solved,
                solution=format_puzzle(t.solution) if t.solution else None,
                elapsed_ms=t.elapsed * 1000.0,
                steps=t.steps,
            )
            for t in timings
        ],
        stats=BatchStatsInfo(
            count=stats.count,
            solved=stats.solved,
            unsolved=stats.unsolved,
            total_ms=stats.total * 1000.0,
            average_ms=stats.average * 1000.0,
            max_ms=stats.maximum * 1000.0,
            min_ms=stats.minimum * 1000.0,
        ),
    )
