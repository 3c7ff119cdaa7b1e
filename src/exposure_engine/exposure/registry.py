"""Exposure registry - ordered exposures for one entity type."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from ..errors import ConfigurationError
from .types import AS, IF, UNLESS, USING, ComputeFn, Exposure, canonical_name

logger = logging.getLogger(__name__)


class ExposureRegistry:
    """
    Thread-safe, ordered registry of exposures for an entity type.

    Supports:
    - Multi-attribute declarations sharing one set of options
    - Declaration-time validation
    - Inheritance (a child registry layers its exposures over its parent's)
    - Copy-on-write updates, so readers always see a complete snapshot
    """

    def __init__(self, name: str = "", parent: ExposureRegistry | None = None):
        self.name = name
        self._parent = parent
        self._exposures: dict[str, Exposure] = {}
        self._lock = threading.RLock()

    @property
    def parent(self) -> ExposureRegistry | None:
        return self._parent

    def extend(self, name: str = "") -> ExposureRegistry:
        """Create a child registry inheriting this registry's exposures."""
        return ExposureRegistry(name=name, parent=self)

    def declare(
        self,
        attribute_names: Iterable[Any],
        options: Mapping[str, Any] | None = None,
        compute: ComputeFn | None = None,
    ) -> list[Exposure]:
        """
        Declare one or more exposures sharing the same options.

        Args:
            attribute_names: Attribute names to expose (at least one)
            options: Declaration options (``as``, ``using``, ``if``, ``unless``
                and any opaque metadata)
            compute: Optional function of ``(object, options)`` producing the value

        Returns:
            The exposures created, in declaration order

        Raises:
            ConfigurationError: If the declaration is invalid
        """
        if isinstance(attribute_names, (str, Enum)):
            attribute_names = [attribute_names]
        names = [canonical_name(n) for n in attribute_names]
        options = dict(options or {})
        self._validate(names, options, compute)

        created = [Exposure.build(name, options, compute) for name in names]

        with self._lock:
            updated = dict(self._exposures)
            for exposure in created:
                if exposure.attribute in updated:
                    logger.debug(f"Redeclared exposure {self.name}.{exposure.attribute}")
                updated[exposure.attribute] = exposure
            self._exposures = updated

        logger.debug(f"Declared exposures on {self.name or 'registry'}: {', '.join(names)}")
        return created

    def _validate(
        self,
        names: list[str],
        options: dict[str, Any],
        compute: ComputeFn | None,
    ) -> None:
        if not names:
            raise ConfigurationError("at least one attribute name is required")

        if options.get(AS) is not None and len(names) > 1:
            raise ConfigurationError("cannot use 'as' with multiple attributes")

        if compute is not None:
            if len(names) > 1:
                raise ConfigurationError("cannot use a computed function with multiple attributes")
            if not callable(compute):
                raise ConfigurationError(f"computed value for '{names[0]}' is not callable")

        for key in (IF, UNLESS):
            condition = options.get(key)
            if condition is not None and not (isinstance(condition, Mapping) or callable(condition)):
                raise ConfigurationError(
                    f"'{key}' must be a mapping of option flags or a predicate, "
                    f"got {type(condition).__name__}"
                )

        using = options.get(USING)
        if using is not None and not callable(getattr(using, "represent", None)):
            raise ConfigurationError(f"'using' target {using!r} has no represent()")

    # =========================================================================
    # Lookup
    # =========================================================================

    def snapshot(self) -> dict[str, Exposure]:
        """
        Get the effective exposures, in output order.

        Parent exposures come first; a child exposure with the same name takes
        the parent's position, new names follow in declaration order.
        """
        own = self._exposures
        if self._parent is None:
            return dict(own)
        merged = self._parent.snapshot()
        merged.update(own)
        return merged

    def get(self, name: Any) -> Exposure | None:
        """Get an exposure by attribute name."""
        name = canonical_name(name)
        exposure = self._exposures.get(name)
        if exposure is None and self._parent is not None:
            return self._parent.get(name)
        return exposure

    def key_for(self, name: Any) -> str:
        """Resolve the output key for an attribute name."""
        exposure = self.get(name)
        if exposure is None:
            return canonical_name(name)
        return exposure.output_key

    def names(self) -> list[str]:
        return list(self.snapshot())

    def values(self) -> list[Exposure]:
        return list(self.snapshot().values())

    def items(self) -> list[tuple[str, Exposure]]:
        return list(self.snapshot().items())

    def own_names(self) -> list[str]:
        """Names declared on this registry, excluding inherited ones."""
        return list(self._exposures)

    def __len__(self) -> int:
        return len(self.snapshot())

    def __contains__(self, name: Any) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"ExposureRegistry({self.name!r}, exposures={self.names()!r})"
