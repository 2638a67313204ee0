from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from esper import World

from advtrack.components.advancement import Advancement
from advtrack.components.tracker_state import TrackerState
from advtrack.constants import DEFAULT_CATEGORY, DEFAULT_VERSION
from advtrack.factories.objectives import create_advancements, load_advancements


def create_world(
    *,
    category: str = DEFAULT_CATEGORY,
    version: str = DEFAULT_VERSION,
    manual_checklist_mode: bool = False,
    definitions: Iterable[Mapping[str, Any]] | None = None,
    definitions_path: Path | None = None,
) -> World:
    """Create a world holding the tracker state and the static objective entities."""
    world = World()

    # Register the global tracker state resource.
    world.create_entity(
        TrackerState(
            category=category,
            version=version,
            manual_checklist_mode=manual_checklist_mode,
            manual_checklist_invalidated=manual_checklist_mode,
        )
    )

    if definitions is not None:
        create_advancements(world, definitions)
    if definitions_path is not None:
        load_advancements(world, definitions_path)
    for _, advancement in world.get_component(Advancement):
        advancement.criteria.manual_mode = manual_checklist_mode
    return world
