"""Reader for mapping-shaped objects (dicts, parsed JSON/YAML)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import AttributeReader


class MappingReader(AttributeReader):
    """Reads attributes as mapping keys."""

    def handles(self, obj: Any) -> bool:
        return isinstance(obj, Mapping)

    def read(self, obj: Any, name: str) -> Any:
        return obj.get(name)
