from __future__ import annotations

from typing import Dict, Tuple

from esper import World

from advtrack.components.advancement import Advancement
from advtrack.components.objective import Criterion


def advancement_index(world: World) -> Dict[str, Advancement]:
    """Map advancement id to advancement for every advancement entity."""
    return {advancement.id: advancement for _, advancement in world.get_component(Advancement)}


def criteria_index(world: World) -> Dict[Tuple[str, str], Criterion]:
    """Flattened ``(owner_id, criterion_id)`` view of every criterion in the world."""
    index: Dict[Tuple[str, str], Criterion] = {}
    for _, advancement in world.get_component(Advancement):
        advancement.criteria.clone_criteria(index)
    return index


def find_advancement(world: World, advancement_id: str) -> Advancement | None:
    for _, advancement in world.get_component(Advancement):
        if advancement.id == advancement_id:
            return advancement
    return None
