"""
Entity definitions

Declares entity types from YAML/JSON files instead of Python code. Loaded
entities are kept in an EntityCatalog by name.
"""

from .catalog import EntityCatalog
from .loader import EntityLoader, load_entities
from .models import EntityModel, ExposureModel

__all__ = [
    "EntityCatalog",
    "EntityLoader",
    "load_entities",
    "EntityModel",
    "ExposureModel",
]
