"""Output helpers - turn representations into JSON or YAML text."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from .config import OutputConfig
from .entity.base import Entity


def serialize(
    representation: Entity | list[Entity],
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any] | list[dict[str, Any]]:
    """Serialize one entity, or a list of entities, to plain data."""
    if isinstance(representation, Entity):
        return representation.serializable_hash(options)
    return [item.serializable_hash(options) for item in representation]


def to_plain(value: Any) -> Any:
    """
    Convert serialized values to JSON/YAML friendly types.

    Enums become their values, dates become ISO strings, tuples and sets
    become lists. Anything else unknown is rendered with str().
    """
    if isinstance(value, Enum):
        return to_plain(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    return str(value)


def to_json(
    representation: Entity | list[Entity],
    config: OutputConfig | None = None,
) -> str:
    """Render a representation as JSON text."""
    config = config or OutputConfig()
    return json.dumps(
        to_plain(serialize(representation)),
        indent=config.indent,
        sort_keys=config.sort_keys,
        ensure_ascii=config.ensure_ascii,
    )


def to_yaml(
    representation: Entity | list[Entity],
    config: OutputConfig | None = None,
) -> str:
    """Render a representation as YAML text."""
    config = config or OutputConfig()
    return yaml.safe_dump(
        to_plain(serialize(representation)),
        default_flow_style=config.default_flow_style,
        sort_keys=config.sort_keys,
        allow_unicode=not config.ensure_ascii,
        indent=config.indent or 2,
    )


def render(
    representation: Entity | list[Entity],
    config: OutputConfig | None = None,
) -> str:
    """Render in the configured output format (json or yaml)."""
    config = config or OutputConfig()
    if config.format == "yaml":
        return to_yaml(representation, config)
    if config.format == "json":
        return to_json(representation, config)
    raise ValueError(f"Unsupported output format: {config.format}")


def write(
    representation: Entity | list[Entity],
    file_path: str | Path,
    config: OutputConfig | None = None,
) -> None:
    """Render a representation and write it to a file."""
    path = Path(file_path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render(representation, config))
