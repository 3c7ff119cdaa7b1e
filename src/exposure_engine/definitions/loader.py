"""Entity loader - builds entity types from YAML/JSON definition files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..entity.base import Entity
from ..errors import DefinitionError
from .catalog import EntityCatalog
from .models import EntityModel, ExposureModel

logger = logging.getLogger(__name__)


def _class_name(name: str) -> str:
    parts = name.replace("-", "_").split("_")
    return "".join(p[:1].upper() + p[1:] for p in parts if p) + "Entity"


class EntityLoader:
    """
    Loads entity definitions from YAML or JSON files.

    File format:
    ```yaml
    user:
      exposures:
        - attributes: [name, email]
        - attributes: [friends]
          using: user
        - attributes: [api_token]
          as: token
          if: {admin: true}

    admin_user:
      extends: user
      exposures:
        - attributes: [permissions]
    ```

    Entities may refer to each other (and to themselves) in ``using``, and
    to a base entity in ``extends``, regardless of file order.
    """

    def __init__(self, catalog: EntityCatalog | None = None):
        self.catalog = catalog if catalog is not None else EntityCatalog()

    def load_file(self, path: str | Path) -> EntityCatalog:
        """Load entity definitions from a YAML or JSON file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Definition file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                import json
                data = json.load(f)

        return self.load_dict(data or {})

    def load_dict(self, data: dict[str, Any]) -> EntityCatalog:
        """Load entity definitions from a dictionary."""
        if not isinstance(data, dict):
            raise DefinitionError(
                f"Definitions must be a mapping of entity names, got {type(data).__name__}"
            )

        definitions = {name: self._parse_entity(name, entity_data) for name, entity_data in data.items()}

        created: dict[str, type[Entity]] = {}
        for name in definitions:
            self._create(name, definitions, created, ())

        for name, definition in definitions.items():
            entity = created[name]
            for exposure in definition.exposures:
                self._declare(name, entity, exposure, created)
            logger.debug(f"Loaded entity {name}: {', '.join(entity.exposures.names())}")

        # Register only once every entity is fully declared
        for name, entity in created.items():
            self.catalog.register(name, entity)

        logger.info(f"Loaded {len(definitions)} entities")
        return self.catalog

    def _parse_entity(self, name: str, data: Any) -> EntityModel:
        if name in self.catalog:
            raise DefinitionError(f"Entity '{name}' already registered")
        try:
            return EntityModel.model_validate(data or {})
        except ValidationError as e:
            raise DefinitionError(f"Invalid definition for entity '{name}': {e}") from e

    def _create(
        self,
        name: str,
        definitions: dict[str, EntityModel],
        created: dict[str, type[Entity]],
        chain: tuple[str, ...],
    ) -> type[Entity]:
        """Create an entity type after its base, detecting extends cycles."""
        if name in created:
            return created[name]
        if name in chain:
            cycle = " -> ".join(chain + (name,))
            raise DefinitionError(f"Circular 'extends' chain: {cycle}")

        definition = definitions[name]
        base: type[Entity] = Entity
        if definition.extends:
            if definition.extends in definitions:
                base = self._create(definition.extends, definitions, created, chain + (name,))
            else:
                base = self._lookup(name, "extends", definition.extends, created)

        entity = type(
            _class_name(name),
            (base,),
            {"__module__": __name__, "__doc__": definition.description},
        )
        created[name] = entity
        return entity

    def _lookup(
        self,
        name: str,
        field: str,
        target: str,
        created: dict[str, type[Entity]],
    ) -> type[Entity]:
        entity = created.get(target) or self.catalog.get(target)
        if entity is None:
            raise DefinitionError(f"Entity '{name}' {field} unknown entity '{target}'")
        return entity

    def _declare(
        self,
        name: str,
        entity: type[Entity],
        exposure: ExposureModel,
        created: dict[str, type[Entity]],
    ) -> None:
        options: dict[str, Any] = dict(exposure.metadata)
        if exposure.as_ is not None:
            options["as"] = exposure.as_
        if exposure.using is not None:
            options["using"] = self._lookup(name, "uses", exposure.using, created)
        if exposure.if_ is not None:
            options["if"] = exposure.if_
        if exposure.unless is not None:
            options["unless"] = exposure.unless

        entity.exposures.declare(exposure.attributes, options)


def load_entities(path: str | Path, catalog: EntityCatalog | None = None) -> EntityCatalog:
    """Load entity definitions from a file."""
    return EntityLoader(catalog).load_file(path)
