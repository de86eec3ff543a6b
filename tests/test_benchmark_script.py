"""Tests for the solver benchmark script."""

import logging

import pytest

from scripts import benchmark_solver
from scripts.benchmark_solver import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert args.file is None
    assert args.workers == 1
    assert args.strategy is None
    assert len(args.puzzle) == 81


def test_parse_args_strategy_case_insensitive():
    assert parse_args(["--strategy", "MRV"]).strategy == "mrv"


@pytest.mark.parametrize("flag", ["--limit", "--workers"])
@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_parse_args_rejects_non_positive(flag, value):
    with pytest.raises(SystemExit):
        parse_args(["--file", "puzzles.txt", flag, value])


def test_single_puzzle(monkeypatch, capsys, classic_line):
    monkeypatch.delenv("SOLVER_STRATEGY", raising=False)

    assert main(["--puzzle", classic_line]) == 0

    out = capsys.readouterr().out
    assert "Found solution in" in out
    assert "5 3 4 | 6 7 8 | 9 1 2" in out


@pytest.mark.parametrize("env_value", ["MRV", " last "])
def test_strategy_from_env_is_normalized(monkeypatch, capsys, classic_line, env_value):
    monkeypatch.setenv("SOLVER_STRATEGY", env_value)

    assert main(["--puzzle", classic_line]) == 0
    assert "5 3 4 | 6 7 8 | 9 1 2" in capsys.readouterr().out


def test_unknown_env_strategy_falls_back(monkeypatch, capsys, caplog, classic_line):
    monkeypatch.setenv("SOLVER_STRATEGY", "fastest")
    # basicConfig(force=True) would drop the capture handler
    monkeypatch.setattr(benchmark_solver, "_configure_logging", lambda debug: None)

    with caplog.at_level(logging.WARNING, logger="benchmark_solver"):
        code = main(["--puzzle", classic_line])

    assert code == 0
    assert "Found solution in" in capsys.readouterr().out
    assert "fallback to last" in caplog.text


def test_unknown_env_strategy_in_batch(monkeypatch, tmp_path, capsys, classic_line):
    monkeypatch.setenv("SOLVER_STRATEGY", "fastest")
    path = tmp_path / "puzzles.txt"
    path.write_text(classic_line + "\n", encoding="utf-8")

    assert main(["--file", str(path), "--no-progress"]) == 0
    assert "strategy=last" in capsys.readouterr().out


def test_single_puzzle_without_solution(capsys, dead_end_line):
    assert main(["--puzzle", dead_end_line]) == 1
    assert "No solution found" in capsys.readouterr().out


def test_invalid_puzzle_line():
    assert main(["--puzzle", "123"]) == 2


def test_batch_file(tmp_path, capsys, classic_line):
    path = tmp_path / "puzzles.txt"
    path.write_text("\n".join([classic_line] * 5) + "\n", encoding="utf-8")

    code = main(
        ["--file", str(path), "--workers", "2", "--limit", "3", "--no-progress"]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "puzzles=3 workers=2" in out
    assert "solved=3 unsolved=0" in out
    assert "avg=" in out and "max=" in out and "min=" in out


def test_missing_file(tmp_path):
    assert main(["--file", str(tmp_path / "missing.txt")]) == 2


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n", encoding="utf-8")

    assert main(["--file", str(path)]) == 2
