"""Entity system - representing domain objects through exposure registries."""

from .base import COLLECTION, Entity, is_collection

__all__ = [
    "COLLECTION",
    "Entity",
    "is_collection",
]
