"""Exposure system - declared rules and per-entity registries."""

from .types import Exposure, ExposureKind, canonical_name
from .registry import ExposureRegistry
from .conditions import conditions_met

__all__ = [
    "Exposure",
    "ExposureKind",
    "ExposureRegistry",
    "canonical_name",
    "conditions_met",
]
