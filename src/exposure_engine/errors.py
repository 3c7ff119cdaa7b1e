"""Exception types raised by the exposure engine."""

from __future__ import annotations


class EntityError(Exception):
    """Base exception for entity errors."""
    pass


class ConfigurationError(EntityError, ValueError):
    """Raised at declaration time when exposure options are invalid."""
    pass


class ConstructionError(EntityError, TypeError):
    """Raised when an entity is instantiated without an object argument."""
    pass


class DefinitionError(EntityError, ValueError):
    """Raised when an entity definition file cannot be turned into entities."""
    pass
