"""Entity - the representation engine."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence, Set
from typing import Any, ClassVar

from ..errors import ConstructionError
from ..exposure.conditions import conditions_met
from ..exposure.registry import ExposureRegistry
from ..exposure.types import AS, IF, UNLESS, USING, ComputeFn, Exposure, ExposureKind
from ..readers.registry import ReaderRegistry, default_readers

# Option set on every element of a represented collection
COLLECTION = "collection"

_MISSING = object()


def is_collection(value: Any) -> bool:
    """Check if a value should be represented element by element."""
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, (Sequence, Set, Iterator))


class Entity:
    """
    One representation of a domain object under an entity type.

    Every subclass gets its own ExposureRegistry, layered over the registry
    of its closest Entity base, and its own copy of the base's readers:

        class UserEntity(Entity):
            pass

        UserEntity.expose("name", "email")
        UserEntity.expose("friends", using=UserEntity)
        UserEntity.expose("token", if_={"admin": True})

        UserEntity.represent(user).serializable_hash()
    """

    exposures: ClassVar[ExposureRegistry] = ExposureRegistry("Entity")
    readers: ClassVar[ReaderRegistry] = default_readers()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parent = next(
            base.__dict__["exposures"] for base in cls.__mro__[1:]
            if isinstance(base.__dict__.get("exposures"), ExposureRegistry)
        )
        cls.exposures = parent.extend(cls.__name__)
        # Readers registered on a subclass must not leak to its base or siblings
        if "readers" not in cls.__dict__:
            cls.readers = cls.readers.copy()

    # =========================================================================
    # Declaration
    # =========================================================================

    @classmethod
    def expose(
        cls,
        *attributes: Any,
        as_: Any = None,
        using: Any = None,
        if_: Any = None,
        unless: Any = None,
        compute: ComputeFn | None = None,
        **metadata: Any,
    ) -> None:
        """
        Declare exposed attributes.

        Args:
            *attributes: Attribute names to expose
            as_: Output key override (single attribute only)
            using: Entity type to represent the attribute value with
            if_: Required option flags, or a predicate ``(object, options)``
            unless: Excluding option flags, or a predicate ``(object, options)``
            compute: Function ``(object, options)`` producing the value
                (single attribute only)
            **metadata: Opaque options kept on every exposure

        Raises:
            ConfigurationError: If the declaration is invalid
        """
        options = dict(metadata)
        for key, value in ((AS, as_), (USING, using), (IF, if_), (UNLESS, unless)):
            if value is not None:
                options[key] = value
        cls.exposures.declare(attributes, options, compute)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def represent(
        cls,
        obj: Any,
        options: Mapping[str, Any] | None = None,
    ) -> Entity | list[Entity]:
        """
        Represent an object, or each element of a collection.

        Collection elements receive the options plus ``collection: True``.
        """
        options = dict(options or {})
        if is_collection(obj):
            return [cls(item, {**options, COLLECTION: True}) for item in obj]
        return cls(obj, options)

    def __init__(self, obj: Any = _MISSING, options: Mapping[str, Any] | None = None):
        if obj is _MISSING:
            raise ConstructionError(f"{type(self).__name__} requires an object to represent")
        self._object = obj
        self._options: dict[str, Any] = dict(options or {})

    @property
    def object(self) -> Any:
        return self._object

    @property
    def options(self) -> dict[str, Any]:
        return self._options

    # =========================================================================
    # Serialization
    # =========================================================================

    def serializable_hash(self, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Build the output mapping.

        A non-None ``options`` replaces the stored options for this call.
        """
        options = self._options if options is None else options
        result: dict[str, Any] = {}

        for exposure in self.exposures.values():
            if not conditions_met(exposure, self._object, options):
                continue
            result[exposure.output_key] = self._resolve(exposure, options)

        return result

    def value_for(self, attribute: Any, options: Mapping[str, Any] | None = None) -> Any:
        """
        Resolve the value of one exposed attribute.

        Raises:
            KeyError: If the attribute is not exposed by this entity
        """
        exposure = self.exposures.get(attribute)
        if exposure is None:
            raise KeyError(f"{type(self).__name__} does not expose '{attribute}'")
        return self._resolve(exposure, self._options if options is None else options)

    def key_for(self, attribute: Any) -> str:
        """Resolve the output key of an attribute."""
        return self.exposures.key_for(attribute)

    def conditions_met(self, attribute: Any, options: Mapping[str, Any] | None = None) -> bool:
        """Check whether an exposed attribute is emitted under the options."""
        exposure = self.exposures.get(attribute)
        if exposure is None:
            raise KeyError(f"{type(self).__name__} does not expose '{attribute}'")
        return conditions_met(exposure, self._object, self._options if options is None else options)

    def _resolve(self, exposure: Exposure, options: Mapping[str, Any]) -> Any:
        kind = exposure.kind

        if kind is ExposureKind.COMPUTED:
            return exposure.compute(self._object, options)

        value = self.readers.read(self._object, exposure.attribute)
        if kind is ExposureKind.DIRECT or value is None:
            return value

        represented = exposure.using.represent(value, options)
        if isinstance(represented, list):
            return [item.serializable_hash() for item in represented]
        return represented.serializable_hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._object!r}, options={self._options!r})"
