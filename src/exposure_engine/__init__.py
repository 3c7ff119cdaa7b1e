"""
Exposure Engine - declarative attribute exposure and serialization

Turns domain objects into plain, transmission-ready mappings:
- Per-entity exposure registries with inheritance
- Aliased, computed, nested and conditional exposures
- Pluggable attribute readers (mappings, pydantic models, plain objects)
- Entity definitions loaded from YAML/JSON
"""

from .entity import Entity
from .errors import ConfigurationError, ConstructionError, DefinitionError, EntityError
from .exposure import Exposure, ExposureKind, ExposureRegistry, conditions_met

__version__ = "0.1.0"

__all__ = [
    "Entity",
    "Exposure",
    "ExposureKind",
    "ExposureRegistry",
    "conditions_met",
    "EntityError",
    "ConfigurationError",
    "ConstructionError",
    "DefinitionError",
]
