"""Fallback reader for plain objects."""

from __future__ import annotations

from typing import Any

from .base import AttributeReader


class ObjectReader(AttributeReader):
    """Reads attributes with getattr; handles any object."""

    def handles(self, obj: Any) -> bool:
        return True

    def read(self, obj: Any, name: str) -> Any:
        return getattr(obj, name, None)
