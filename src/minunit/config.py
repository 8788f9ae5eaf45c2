from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator

from minunit.errors import ConfigError
from minunit.sink import LoggingSink, NullSink, PrintSink
from minunit.verbose import setup_logger

DEFAULT_CONFIG_NAME = "minunit.yaml"


class MinunitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    print_enabled: bool = Field(True, alias="print")
    verbose: bool = False
    log_file: str | None = None
    suites: list[str] = []

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} and ${VAR:-default}; unset variables without a default are errors."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"log_file references an unset environment variable: {e}")

    @field_validator("suites")
    @classmethod
    def suites_must_be_references(cls, v: list[str]) -> list[str]:
        for ref in v:
            module, sep, attr = ref.partition(":")
            if not sep or not module or not attr:
                raise ValueError(f"Suite reference '{ref}' must look like 'module:attribute'")
        return v


def load_config(path: Path) -> MinunitConfig:
    """Load and validate a minunit config from a YAML file."""
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping")

    config = MinunitConfig(**raw)

    # Resolve a relative log file against the config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config


def build_sink(config: MinunitConfig, logger_name: str = "minunit") -> PrintSink:
    """Create the print sink described by *config*."""
    if not config.print_enabled:
        return NullSink()
    log_file = Path(config.log_file) if config.log_file else None
    return LoggingSink(setup_logger(log_file, verbose=config.verbose, logger_name=logger_name))
