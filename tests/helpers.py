from __future__ import annotations

from typing import Iterable, Tuple
from uuid import UUID

from advtrack.components.snapshot import Contribution, Uuid, WorldState

ALICE = UUID("00000000-0000-0000-0000-00000000000a")
BOB = UUID("00000000-0000-0000-0000-00000000000b")
CAROL = UUID("00000000-0000-0000-0000-00000000000c")

BIOMES_ID = "minecraft:adventure/adventuring_time"
MONSTERS_ID = "minecraft:adventure/kill_all_mobs"
STORY_ROOT_ID = "minecraft:story/root"
ADVENTURE_ROOT_ID = "minecraft:adventure/root"
IRON_ID = "minecraft:story/smelt_iron"
DIAMONDS_ID = "minecraft:story/mine_diamond"


def sample_definitions() -> list[dict]:
    """A small slice of real advancement data: two roots, two leaves and two multi-part ones."""
    return [
        {"id": STORY_ROOT_ID, "name": "Minecraft", "category": "story"},
        {"id": IRON_ID, "name": "Acquire Hardware", "category": "story"},
        {"id": DIAMONDS_ID, "name": "Diamonds!", "category": "story"},
        {"id": ADVENTURE_ROOT_ID, "name": "Adventure", "category": "adventure"},
        {
            "id": BIOMES_ID,
            "name": "Adventuring Time",
            "category": "adventure",
            "criteria": {
                "goal": "Biomes Visited",
                "items": [
                    {"id": "minecraft:plains", "name": "Plains"},
                    {"id": "minecraft:desert", "name": "Desert"},
                    {"id": "minecraft:jungle", "name": "Jungle"},
                    {"id": "minecraft:badlands", "name": "Badlands"},
                ],
            },
        },
        {
            "id": MONSTERS_ID,
            "name": "Monsters Hunted",
            "category": "adventure",
            "criteria": {
                "items": [
                    {"id": "minecraft:zombie", "name": "Zombie"},
                    {"id": "minecraft:skeleton", "name": "Skeleton"},
                    {"id": "minecraft:creeper", "name": "Creeper"},
                ],
            },
        },
    ]


def contribution(
    player: Uuid,
    *,
    advancements: Iterable[str] = (),
    criteria: Iterable[Tuple[str, str]] = (),
) -> Contribution:
    return Contribution(
        player,
        advancements=dict.fromkeys(advancements),
        criteria=dict.fromkeys(criteria),
    )


def snapshot_of(*contributions: Contribution) -> WorldState:
    state = WorldState()
    for entry in contributions:
        state.players[entry.player] = entry
        for advancement_id in entry.advancements:
            state.advancements.setdefault(advancement_id, None)
        for ref in entry.criteria:
            state.criteria.setdefault(ref, None)
    return state


def biome_refs(*names: str) -> list[Tuple[str, str]]:
    return [(BIOMES_ID, f"minecraft:{name}") for name in names]


def mob_refs(*names: str) -> list[Tuple[str, str]]:
    return [(MONSTERS_ID, f"minecraft:{name}") for name in names]
