"""Exposure types - one declared rule per output field."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Union

# (object, options) -> value
ComputeFn = Callable[[Any, Mapping[str, Any]], Any]

# (object, options) -> truthy
Predicate = Callable[[Any, Mapping[str, Any]], Any]

# Either required option flags or a predicate
Condition = Union[Mapping[str, Any], Predicate]

# Option keys interpreted by the engine; everything else is opaque metadata
AS = "as"
USING = "using"
IF = "if"
UNLESS = "unless"
RESERVED_OPTIONS = frozenset({AS, USING, IF, UNLESS})


class ExposureKind(str, Enum):
    """How an exposure produces its value."""
    DIRECT = "direct"      # Attribute copied as-is
    COMPUTED = "computed"  # Value returned by a compute function
    NESTED = "nested"      # Attribute represented through another entity


def canonical_name(name: Any) -> str:
    """
    Normalize an attribute name to its canonical string form.

    String enum members resolve to their value so that ``Field.NAME`` and
    ``"name"`` address the same exposure.
    """
    if isinstance(name, Enum):
        name = name.value
    return str(name)


@dataclass(frozen=True, slots=True)
class Exposure:
    """
    A declared rule mapping one source attribute to one output field.

    The declaration options are kept verbatim (read-only) so every attribute
    of a multi-attribute declaration carries an identical copy.
    """
    attribute: str
    options: Mapping[str, Any] = field(default_factory=dict)
    compute: ComputeFn | None = None

    @classmethod
    def build(
        cls,
        attribute: Any,
        options: Mapping[str, Any] | None = None,
        compute: ComputeFn | None = None,
    ) -> Exposure:
        """Create an exposure with a frozen copy of the given options."""
        return cls(
            attribute=canonical_name(attribute),
            options=MappingProxyType(dict(options or {})),
            compute=compute,
        )

    @property
    def output_key(self) -> str:
        alias = self.options.get(AS)
        return canonical_name(alias) if alias is not None else self.attribute

    @property
    def using(self) -> Any:
        return self.options.get(USING)

    @property
    def if_condition(self) -> Condition | None:
        return self.options.get(IF)

    @property
    def unless_condition(self) -> Condition | None:
        return self.options.get(UNLESS)

    @property
    def metadata(self) -> dict[str, Any]:
        """Options the engine does not interpret."""
        return {k: v for k, v in self.options.items() if k not in RESERVED_OPTIONS}

    @property
    def kind(self) -> ExposureKind:
        if self.compute is not None:
            return ExposureKind.COMPUTED
        if self.using is not None:
            return ExposureKind.NESTED
        return ExposureKind.DIRECT

    def has_conditions(self) -> bool:
        return self.if_condition is not None or self.unless_condition is not None
