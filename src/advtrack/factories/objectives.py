from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from esper import World

from advtrack.components.advancement import Advancement
from advtrack.components.criteria_set import CriteriaSet
from advtrack.components.objective import Criterion
from advtrack.errors import DefinitionError, PersistenceError
from advtrack.utils.objectives import advancement_index

logger = logging.getLogger(__name__)


def _require(definition: Mapping[str, Any], field_name: str, context: str) -> str:
    value = definition.get(field_name)
    if not isinstance(value, str) or not value.strip():
        raise DefinitionError(f"{context} is missing '{field_name}'")
    return value


def advancement_from_definition(definition: Mapping[str, Any]) -> Advancement:
    """Build an advancement and its criteria from a static game-data mapping.

    Expected shape::

        {"id": "minecraft:adventure/adventuring_time", "name": "Adventuring Time",
         "category": "adventure", "icon": "...",
         "criteria": {"goal": "Biomes Visited",
                      "items": [{"id": "minecraft:plains", "name": "Plains"}, ...]}}

    Criteria keep their declaration order.
    """
    advancement_id = _require(definition, "id", "Advancement")
    category = str(definition.get("category", ""))
    criteria_node = definition.get("criteria") or {}
    criteria: List[Criterion] = []
    for item in criteria_node.get("items", ()):
        criterion_id = _require(item, "id", f"Criterion of '{advancement_id}'")
        criteria.append(
            Criterion(
                id=criterion_id,
                name=str(item.get("name") or criterion_id),
                category=category,
                icon=str(item.get("icon", "")),
                owner_id=advancement_id,
            )
        )
    criteria_set = CriteriaSet(advancement_id, criteria, goal=criteria_node.get("goal"))
    return Advancement(
        id=advancement_id,
        name=str(definition.get("name") or advancement_id),
        category=category,
        icon=str(definition.get("icon", "")),
        criteria=criteria_set,
    )


def create_advancement(world: World, definition: Mapping[str, Any]) -> int:
    advancement = advancement_from_definition(definition)
    return world.create_entity(advancement)


def create_advancements(world: World, definitions: Iterable[Mapping[str, Any]]) -> List[int]:
    """Create one entity per definition, rejecting ids already present in the world."""
    known = set(advancement_index(world))
    entities: List[int] = []
    for definition in definitions:
        advancement = advancement_from_definition(definition)
        if advancement.id in known:
            raise DefinitionError(f"Advancement '{advancement.id}' already defined")
        known.add(advancement.id)
        entities.append(world.create_entity(advancement))
    return entities


def load_advancements(world: World, path: Path) -> List[int]:
    """Load a JSON list of advancement definitions (or ``{"advancements": [...]}``)."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise PersistenceError(path, "Could not read advancement definitions") from exc
    except json.JSONDecodeError as exc:
        raise DefinitionError(f"Malformed advancement definitions in {path}: {exc}") from exc
    if isinstance(payload, Mapping):
        payload = payload.get("advancements", [])
    entities = create_advancements(world, payload)
    logger.info("Loaded %d advancements from %s", len(entities), path)
    return entities
