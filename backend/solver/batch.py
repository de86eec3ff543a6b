"""Timed solving and throughput benchmarking over many puzzles."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tqdm import tqdm

from .backtracking import SudokuSolver
from .board import Grid

_LOGGER = logging.getLogger(__name__)


@dataclass
class SolveTiming:
    index: int
    solved: bool
    elapsed: float
    steps: int
    solution: Optional[Grid] = None


@dataclass
class BatchStats:
    count: int = 0
    solved: int = 0
    unsolved: int = 0
    total: float = 0.0
    average: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0


def time_solve(grid: Grid, index: int = 0, strategy: str = "last") -> SolveTiming:
    """Solve one puzzle and record its wall-clock time."""
    solver = SudokuSolver(strategy)
    start = time.perf_counter()
    solution = solver.solve(grid)
    elapsed = time.perf_counter() - start

    return SolveTiming(
        index=index,
        solved=solution is not None,
        elapsed=elapsed,
        steps=solver.steps,
        solution=solution,
    )


def run_batch(
    puzzles: Iterable[Grid],
    workers: int = 1,
    strategy: str = "last",
    progress: bool = False,
) -> List[SolveTiming]:
    """
    Solve every puzzle independently.

    With ``workers > 1`` puzzles are spread over a thread pool and timings
    come back in completion order, not input order.
    """
    grids = list(puzzles)
    timings: List[SolveTiming] = []

    with tqdm(total=len(grids), desc="Solving", unit="puzzle", disable=not progress) as bar:
        if workers <= 1:
            for index, grid in enumerate(grids):
                timings.append(time_solve(grid, index, strategy))
                bar.update(1)
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = [
                    pool.submit(time_solve, grid, index, strategy)
                    for index, grid in enumerate(grids)
                ]
                for future in as_completed(futures):
                    timings.append(future.result())
                    bar.update(1)

    _LOGGER.info(
        "Batch finished: puzzles=%d workers=%d strategy=%s",
        len(grids),
        workers,
        strategy,
    )
    return timings


def summarize(timings: Iterable[SolveTiming]) -> BatchStats:
    """Aggregate solve times into sum, average, max and min."""
    items = list(timings)
    if not items:
        return BatchStats()

    elapsed = [t.elapsed for t in items]
    solved = sum(1 for t in items if t.solved)
    total = sum(elapsed)

    return BatchStats(
        count=len(items),
        solved=solved,
        unsolved=len(items) - solved,
        total=total,
        average=total / len(items),
        maximum=max(elapsed),
        minimum=min(elapsed),
    )
