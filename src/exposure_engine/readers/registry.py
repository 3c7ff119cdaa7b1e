"""Reader registry - picks the attribute reader for a domain object."""

from __future__ import annotations

from typing import Any

from .attribute import ObjectReader
from .base import AttributeReader
from .mapping import MappingReader
from .model import ModelReader


class ReaderRegistry:
    """
    Ordered registry of attribute readers.

    The first reader that handles an object is used. Custom readers are
    registered in front of the built-in ones.
    """

    def __init__(self, readers: list[AttributeReader] | None = None):
        self._readers: list[AttributeReader] = list(readers or [])

    def register(self, reader: AttributeReader) -> None:
        """Register a reader ahead of the existing ones."""
        self._readers.insert(0, reader)

    def reader_for(self, obj: Any) -> AttributeReader | None:
        """Get the reader for an object, or None if no reader handles it."""
        for reader in self._readers:
            if reader.handles(obj):
                return reader
        return None

    def read(self, obj: Any, name: str) -> Any:
        """Read an attribute; None objects and unhandled objects yield None."""
        if obj is None:
            return None
        reader = self.reader_for(obj)
        if reader is None:
            return None
        return reader.read(obj, name)

    def copy(self) -> ReaderRegistry:
        return ReaderRegistry(self._readers)

    def __len__(self) -> int:
        return len(self._readers)


def default_readers() -> ReaderRegistry:
    """Create a registry with the built-in readers."""
    return ReaderRegistry([MappingReader(), ModelReader(), ObjectReader()])
