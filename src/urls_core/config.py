"""Configuration loading utilities for URLs Core.

The extraction engine enforces its own fixed ceilings; the values here only
let callers decide whether to run it and how to present the results.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .paths import project_config_path, runtime_config_dir


class SafetyConfig(BaseModel):
    enabled: bool = Field(default=True, description="Run pre-flight size checks before extracting")
    file_size_warn_bytes: int = Field(default=1_000_000, ge=1000)
    large_output_lines_threshold: int = Field(default=50_000, ge=100)
    many_documents_threshold: int = Field(default=8, ge=1)


class OutputConfig(BaseModel):
    dedupe_enabled: bool = Field(default=False, description="Deduplicate extracted URLs")
    show_parse_errors: bool = Field(default=False, description="Print parse errors after results")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.lower() not in {"critical", "error", "warning", "info", "debug"}:
            raise ValueError(f"Unknown logging level: {value}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    safety: SafetyConfig = Field(default_factory=SafetyConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
