"""Attribute readers - how exposures read values from domain objects."""

from .base import AttributeReader
from .mapping import MappingReader
from .model import ModelReader
from .attribute import ObjectReader
from .registry import ReaderRegistry, default_readers

__all__ = [
    "AttributeReader",
    "MappingReader",
    "ModelReader",
    "ObjectReader",
    "ReaderRegistry",
    "default_readers",
]
