"""Reader for pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .base import AttributeReader


class ModelReader(AttributeReader):
    """
    Reads attributes from pydantic models.

    Resolves, in order: declared fields and computed fields, field aliases,
    then extra values (for models configured with ``extra="allow"``).
    """

    def handles(self, obj: Any) -> bool:
        return isinstance(obj, BaseModel)

    def read(self, obj: Any, name: str) -> Any:
        model_cls = type(obj)
        fields = model_cls.model_fields

        if name in fields or name in model_cls.model_computed_fields:
            return getattr(obj, name)

        for field_name, info in fields.items():
            if info.alias == name:
                return getattr(obj, field_name)

        extra = obj.model_extra
        if extra and name in extra:
            return extra[name]

        return getattr(obj, name, None)
