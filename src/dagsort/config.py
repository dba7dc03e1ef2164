from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .io import read_text

LOG_LEVEL_ENV = "DAGSORT_LOG_LEVEL"

OUTPUT_FORMATS = ("json", "text")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "output": {
            "type": "object",
            "properties": {
                "format": {"enum": list(OUTPUT_FORMATS)},
                "indent": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {"enum": list(LOG_LEVELS)},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


class ConfigError(Exception):
    """Raised when a configuration file or override is unreadable or invalid."""


def env_log_level() -> str | None:
    """Return the DAGSORT_LOG_LEVEL override, uppercased, or None when unset."""
    env = os.environ.get(LOG_LEVEL_ENV)
    if not env:
        return None
    level = env.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid {LOG_LEVEL_ENV} {env!r}: expected one of {', '.join(LOG_LEVELS)}")
    return level


@dataclass(frozen=True)
class SorterConfig:
    raw: dict[str, Any] = field(default_factory=dict)
    config_path: Path | None = None

    @property
    def output_format(self) -> str:
        return self.raw.get("output", {}).get("format", "json")

    @property
    def json_indent(self) -> int:
        return int(self.raw.get("output", {}).get("indent", 2))

    @property
    def log_level(self) -> str:
        return env_log_level() or self.raw.get("logging", {}).get("level", "WARNING")


def load_config(config_path: Path | None = None) -> SorterConfig:
    """Load a YAML config; no path yields the defaults."""
    env_log_level()
    if config_path is None:
        return SorterConfig()
    try:
        raw = yaml.safe_load(read_text(config_path)) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config {config_path}: {e}") from e
    try:
        jsonschema.validate(raw, CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e.message}") from e
    return SorterConfig(raw=raw, config_path=config_path)
