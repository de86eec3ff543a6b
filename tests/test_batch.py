"""Tests for timed solving and batch statistics."""

import pytest

from backend.solver.batch import SolveTiming, run_batch, summarize, time_solve


def test_time_solve_records_result(classic_grid, classic_solution):
    timing = time_solve(classic_grid, index=3)

    assert timing.index == 3
    assert timing.solved is True
    assert timing.solution == classic_solution
    assert timing.elapsed >= 0.0
    assert timing.steps > 0


def test_time_solve_unsolvable(dead_end_grid):
    timing = time_solve(dead_end_grid)

    assert timing.solved is False
    assert timing.solution is None


def test_run_batch_sequential_keeps_order(classic_grid, dead_end_grid):
    timings = run_batch([classic_grid, dead_end_grid, classic_grid])

    assert [t.index for t in timings] == [0, 1, 2]
    assert [t.solved for t in timings] == [True, False, True]


@pytest.mark.parametrize("strategy", ["last", "mrv"])
def test_run_batch_threaded(classic_grid, classic_solution, strategy):
    timings = run_batch([classic_grid] * 6, workers=3, strategy=strategy)

    assert sorted(t.index for t in timings) == list(range(6))
    assert all(t.solution == classic_solution for t in timings)


def test_run_batch_with_progress(classic_grid):
    timings = run_batch([classic_grid], progress=True)

    assert len(timings) == 1


def test_summarize():
    timings = [
        SolveTiming(index=0, solved=True, elapsed=0.5, steps=10),
        SolveTiming(index=1, solved=False, elapsed=1.5, steps=0),
        SolveTiming(index=2, solved=True, elapsed=1.0, steps=4),
    ]

    stats = summarize(timings)

    assert stats.count == 3
    assert stats.solved == 2
    assert stats.unsolved == 1
    assert stats.total == pytest.approx(3.0)
    assert stats.average == pytest.approx(1.0)
    assert stats.maximum == 1.5
    assert stats.minimum == 0.5


def test_summarize_empty_batch():
    stats = summarize([])

    assert stats.count == 0
    assert stats.total == 0.0
    assert stats.average == 0.0
