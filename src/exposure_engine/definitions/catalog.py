"""
Thread-safe entity catalog.

Keeps entity types by name so that definition files can refer to one
another (``using`` and ``extends``).
"""

from __future__ import annotations

import threading
from typing import Iterator

from ..entity.base import Entity
from ..errors import DefinitionError


class EntityCatalog:
    """Thread-safe mapping of entity names to entity types."""

    def __init__(self):
        self._entities: dict[str, type[Entity]] = {}
        self._lock = threading.RLock()

    def register(self, name: str, entity: type[Entity]) -> None:
        """
        Register an entity type under a name.

        Raises:
            DefinitionError: If the name is already taken
        """
        with self._lock:
            if name in self._entities:
                raise DefinitionError(f"Entity '{name}' already registered")
            self._entities[name] = entity

    def get(self, name: str) -> type[Entity] | None:
        """Get an entity type by name."""
        with self._lock:
            return self._entities.get(name)

    def get_or_raise(self, name: str) -> type[Entity]:
        """
        Get an entity type by name, raising if not found.

        Raises:
            DefinitionError: If the entity is not registered
        """
        with self._lock:
            if name not in self._entities:
                raise DefinitionError(f"Entity '{name}' not found")
            return self._entities[name]

    def names(self) -> list[str]:
        """Get registered entity names in registration order."""
        with self._lock:
            return list(self._entities)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._entities

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
