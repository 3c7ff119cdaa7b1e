"""Pydantic models for entity definition files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..exposure.types import RESERVED_OPTIONS


class ExposureModel(BaseModel):
    """One expose statement in a definition file."""
    attributes: list[str] = Field(min_length=1)
    as_: str | None = Field(default=None, alias="as")
    using: str | None = None  # Entity name, may refer to the entity itself
    if_: dict[str, Any] | None = Field(default=None, alias="if")
    unless: dict[str, Any] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("metadata")
    @classmethod
    def _no_reserved_metadata(cls, value: dict[str, Any]) -> dict[str, Any]:
        reserved = sorted(RESERVED_OPTIONS.intersection(value))
        if reserved:
            raise ValueError(
                f"metadata cannot set {', '.join(reserved)}; use the exposure fields instead"
            )
        return value


class EntityModel(BaseModel):
    """An entity definition: optional base entity plus its exposures."""
    extends: str | None = None
    description: str | None = None
    exposures: list[ExposureModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
