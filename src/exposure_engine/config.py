"""Configuration for the exposure engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class OutputConfig:
    """Output rendering configuration."""
    format: str = "json"  # json | yaml
    indent: int | None = 2
    sort_keys: bool = False
    ensure_ascii: bool = False

    # YAML only: emit nested collections inline
    default_flow_style: bool = False


@dataclass
class DefinitionsConfig:
    """Entity definitions configuration."""
    # Path to entity definition file (YAML or JSON)
    definition_file: str | None = None


@dataclass
class Config:
    """Main configuration container."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    definitions: DefinitionsConfig = field(default_factory=DefinitionsConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """
        Create config from dictionary.

        Raises:
            ValueError: If a section is not a mapping or has unknown keys
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config: expected a mapping, got {type(data).__name__}")
        try:
            return cls(
                logging=LoggingConfig(**data.get("logging", {})),
                output=OutputConfig(**data.get("output", {})),
                definitions=DefinitionsConfig(**data.get("definitions", {})),
            )
        except TypeError as e:
            raise ValueError(f"Invalid config: {e}") from e

    @classmethod
    def from_yaml(cls, path: str) -> Config:
        """Load config from YAML file."""
        import yaml
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> Config:
        """Load config from JSON file."""
        import json
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data or {})


def configure_logging(config: LoggingConfig) -> None:
    """Install a root handler using the configured level and format."""
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.WARNING),
        format=config.format,
    )
