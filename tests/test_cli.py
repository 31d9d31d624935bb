"""Tests for the wordbench CLI."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from wordbench import WorkerSpawnError
from wordbench.cli import app

runner = CliRunner()


def test_run_with_paths(corpus: list[Path]) -> None:
    result = runner.invoke(app, ["run", *map(str, corpus)])
    assert result.exit_code == 0, result.output
    assert "[Single-threaded]" in result.output
    assert "[Multithreading]" in result.output
    assert "[Multiprocessing]" in result.output
    assert "Total word count for all files combined:" in result.output


def test_run_single_strategy_options(corpus: list[Path]) -> None:
    result = runner.invoke(
        app,
        ["run", str(corpus[0]), "--strategy", "single", "--top-n", "1", "--workers", "2"],
    )
    assert result.exit_code == 0, result.output
    assert "  alpha          : 3" in result.output
    assert "beta" not in result.output
    assert "[Multithreading]" not in result.output


def test_run_from_config(tmp_path: Path, corpus: list[Path]) -> None:
    cfg = tmp_path / "bench.yaml"
    cfg.write_text(
        "corpus: [bib, paper1]\nstrategies: [threaded]\ncommit_mode: locked\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["run", "--config", str(cfg)])
    assert result.exit_code == 0, result.output
    assert f"Word count for {tmp_path / 'paper1'}: " in result.output
    assert "[Single-threaded]" not in result.output


def test_cli_overrides_config(tmp_path: Path, corpus: list[Path]) -> None:
    cfg = tmp_path / "bench.yaml"
    cfg.write_text("corpus: [bib]\nstrategies: [threaded]\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "--config", str(cfg), "--strategy", "single"])
    assert result.exit_code == 0, result.output
    assert "[Single-threaded]" in result.output
    assert "[Multithreading]" not in result.output


def test_missing_file_is_not_fatal(corpus: list[Path], missing_file: Path) -> None:
    result = runner.invoke(app, ["run", str(missing_file), str(corpus[0]), "--strategy", "single"])
    assert result.exit_code == 0, result.output
    assert f"Failed to open file: {missing_file}" in result.output


def test_no_corpus_is_usage_error() -> None:
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 2


def test_unknown_strategy_is_usage_error(corpus: list[Path]) -> None:
    result = runner.invoke(app, ["run", str(corpus[0]), "--strategy", "gpu"])
    assert result.exit_code == 2


def test_bad_config_exits_1(tmp_path: Path) -> None:
    cfg = tmp_path / "bench.yaml"
    cfg.write_text("workers: 0\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "--config", str(cfg)])
    assert result.exit_code == 1
    assert "ERROR: Invalid config schema" in result.output


def test_fatal_error_exits_1(monkeypatch, corpus: list[Path]) -> None:
    def explode(*args, **kwargs):
        raise WorkerSpawnError("failed to start worker 0")

    monkeypatch.setattr("wordbench.cli.run_benchmark", explode)
    result = runner.invoke(app, ["run", str(corpus[0])])
    assert result.exit_code == 1
    assert "ERROR: failed to start worker 0" in result.output


def test_unknown_log_level_is_usage_error(corpus: list[Path]) -> None:
    result = runner.invoke(app, ["run", str(corpus[0]), "--log-level", "chatty"])
    assert result.exit_code == 2
    assert "--log-level" in result.output


def test_log_level_case_insensitive(corpus: list[Path]) -> None:
    result = runner.invoke(
        app, ["run", str(corpus[0]), "--strategy", "single", "--log-level", "debug"],
    )
    assert result.exit_code == 0, result.output
