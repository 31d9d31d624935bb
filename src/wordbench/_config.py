"""Benchmark configuration: YAML file validated against a pydantic schema."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._errors import ConfigError
from ._segmenter import DEFAULT_WORKERS
from ._topn import DEFAULT_TOP_N

StrategyName = Literal["single", "threaded", "process"]


class BenchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    corpus: list[Path] = Field(min_length=1)
    workers: int = Field(default=DEFAULT_WORKERS, ge=1)
    top_n: int = Field(default=DEFAULT_TOP_N, ge=1)
    strategies: list[StrategyName] = Field(
        default_factory=lambda: ["single", "threaded", "process"], min_length=1,
    )
    commit_mode: Literal["fold", "locked"] = "fold"

    @field_validator("strategies")
    @classmethod
    def _no_duplicate_strategies(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("strategies must not repeat")
        return value


def load_config(path: Path | str) -> BenchConfig:
    """Load and validate a benchmark config from YAML.

    Relative corpus paths are resolved against the config file's directory.
    """
    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {config_path} ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file: {config_path}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    try:
        config = BenchConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config schema: {config_path}\n{exc}") from exc

    base = config_path.parent
    config.corpus = [p if p.is_absolute() else base / p for p in config.corpus]
    return config
