"""Base attribute reader interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AttributeReader(ABC):
    """
    Abstract base class for attribute readers.

    Each reader knows how to read named attributes from one shape of domain
    object (mappings, pydantic models, plain objects...). Readers never raise
    for a missing attribute; they return None instead.
    """

    @abstractmethod
    def handles(self, obj: Any) -> bool:
        """Check if this reader can read attributes from the object."""
        ...

    @abstractmethod
    def read(self, obj: Any, name: str) -> Any:
        """Read an attribute, returning None if it is not present."""
        ...
