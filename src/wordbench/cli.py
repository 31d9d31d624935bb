"""Typer CLI entrypoint for wordbench."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from ._bench import run_benchmark
from ._config import BenchConfig, load_config
from ._errors import WordbenchError
from ._report import format_report
from ._strategies import STRATEGIES

app = typer.Typer(help="Word-frequency counting benchmark", rich_markup_mode=None)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@app.callback()
def cli_callback() -> None:
    """CLI root callback to keep `wordbench run` as explicit command form."""


def _resolve_config(
    config: Path | None,
    paths: list[Path] | None,
    workers: int | None,
    top_n: int | None,
    strategies: list[str] | None,
    commit_mode: str | None,
) -> BenchConfig:
    base: dict[str, object] = {}
    if config is not None:
        base = load_config(config).model_dump()
    overrides = {
        "corpus": paths or None,
        "workers": workers,
        "top_n": top_n,
        "strategies": strategies or None,
        "commit_mode": commit_mode,
    }
    base.update({k: v for k, v in overrides.items() if v is not None})
    if not base.get("corpus"):
        raise typer.BadParameter("no corpus files given (pass PATHS or --config)")
    return BenchConfig.model_validate(base)


@app.command("run")
def run_command(
    paths: Annotated[list[Path] | None, typer.Argument(help="Corpus files, in order.")] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", dir_okay=False, help="YAML benchmark config."),
    ] = None,
    workers: Annotated[int | None, typer.Option(min=1, help="Segments per file.")] = None,
    top_n: Annotated[int | None, typer.Option("--top-n", min=1, help="Words ranked per file.")] = None,
    strategy: Annotated[
        list[str] | None,
        typer.Option(help=f"Strategy to run, repeatable: {', '.join(STRATEGIES)}."),
    ] = None,
    commit_mode: Annotated[str | None, typer.Option(help="fold or locked.")] = None,
    log_level: Annotated[str, typer.Option(help="Logging level.")] = "WARNING",
) -> None:
    """Count word frequencies with each strategy and print the comparison."""

    normalized_level = log_level.upper().strip()
    if normalized_level not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(_LOG_LEVELS)}", param_hint="'--log-level'",
        )
    logging.basicConfig(level=normalized_level, format=_LOG_FORMAT)

    try:
        cfg = _resolve_config(config, paths, workers, top_n, strategy, commit_mode)
    except WordbenchError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError
        raise typer.BadParameter(str(exc)) from exc

    try:
        report = run_benchmark(
            cfg.corpus,
            cfg.strategies,
            workers=cfg.workers,
            top_n=cfg.top_n,
            commit_mode=cfg.commit_mode,
        )
    except WordbenchError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(format_report(report))
