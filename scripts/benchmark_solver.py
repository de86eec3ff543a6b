"""Benchmark the backtracking solver on one puzzle or a file of puzzles."""

from __future__ import annotations

import argparse
import itertools
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.solver.backtracking import STRATEGIES, InvalidGridError, normalize_strategy
from backend.solver.batch import run_batch, summarize, time_solve
from backend.solver.parsing import format_grid, parse_puzzle, read_puzzles

LOGGER = logging.getLogger("benchmark_solver")

CLASSIC_PUZZLE = (
    "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def _env_strategy() -> str:
    """Strategy from SOLVER_STRATEGY, falling back to 'last' like the API does."""
    raw = os.getenv("SOLVER_STRATEGY", "last")
    strategy = normalize_strategy(raw)
    if strategy is None:
        LOGGER.warning("Unsupported SOLVER_STRATEGY=%r, fallback to last", raw)
        return "last"
    return strategy


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle",
        default=CLASSIC_PUZZLE,
        help="81-character puzzle line ('.' or any non-digit for empty cells)",
    )
    source.add_argument(
        "--file",
        type=Path,
        help="File with one 81-character puzzle per line",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="Worker threads for batch runs",
    )
    parser.add_argument(
        "--strategy",
        type=str.lower,
        choices=STRATEGIES,
        default=None,
        help="Cell selection: 'last' (reverse row-major) or 'mrv' (fewest candidates); "
        "defaults to SOLVER_STRATEGY env or 'last'",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Only solve the first N puzzles of --file",
    )
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def run_single(puzzle: str, strategy: str) -> int:
    grid = parse_puzzle(puzzle)
    timing = time_solve(grid, strategy=strategy)

    if not timing.solved:
        print(f"No solution found in {timing.elapsed:.6f}s (steps={timing.steps})")
        return 1

    print(f"Found solution in {timing.elapsed:.6f}s (steps={timing.steps})")
    print(format_grid(timing.solution))
    return 0


def run_file(path: Path, workers: int, strategy: str, limit: Optional[int], progress: bool) -> int:
    puzzles = list(itertools.islice(read_puzzles(path), limit))
    if not puzzles:
        LOGGER.error("No puzzles found in %s", path)
        return 2

    timings = run_batch(puzzles, workers=workers, strategy=strategy, progress=progress)
    stats = summarize(timings)

    print("Solver benchmark results")
    print(f"puzzles={stats.count} workers={workers} strategy={strategy}")
    print(f"solved={stats.solved} unsolved={stats.unsolved}")
    print(f"sum={stats.total:.6f}s avg={stats.average:.6f}s")
    print(f"max={stats.maximum:.6f}s min={stats.minimum:.6f}s")
    return 0 if stats.unsolved == 0 else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)
    strategy = args.strategy or _env_strategy()

    try:
        if args.file is not None:
            return run_file(
                args.file,
                workers=args.workers,
                strategy=strategy,
                limit=args.limit,
                progress=not args.no_progress,
            )
        return run_single(args.puzzle, strategy)
    except InvalidGridError as exc:
        LOGGER.error("Invalid puzzle: %s", exc)
        return 2
    except FileNotFoundError as exc:
        LOGGER.error("Puzzle file not found: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
