from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from advtrack.config.pinned_objectives import (
    CategoryKind,
    PinnedObjectiveSet,
    frame_names,
    get_all_available,
    resolve_key,
)
from advtrack.errors import PersistenceError
from advtrack.events.bus import EVENT_PINNED_LIST_CHANGED, EventBus
from advtrack.systems.pinned_objective_system import PinnedObjectiveSystem
from advtrack.world import create_world


@dataclass
class _Objective:
    name: str


@dataclass
class _Frame:
    objective: _Objective | None


def _frames(*names: str) -> list[_Frame]:
    return [_Frame(_Objective(name)) for name in names]


def test_resolve_key_prefers_newest_revision():
    keys = {"All Advancements 1.21", "All Advancements 1.21 v2"}
    assert resolve_key(keys, "All Advancements", "1.21") == "All Advancements 1.21 v2"


def test_resolve_key_without_revision_returns_base_key():
    keys = {"All Advancements 1.21"}
    assert resolve_key(keys, "All Advancements", "1.21") == "All Advancements 1.21"


def test_resolve_key_stops_at_first_missing_revision():
    keys = {"All Blocks 1.20", "All Blocks 1.20 v2", "All Blocks 1.20 v3", "All Blocks 1.20 v5"}
    assert resolve_key(keys, "All Blocks", "1.20") == "All Blocks 1.20 v3"


def test_resolve_key_for_unknown_category_is_base_key():
    assert resolve_key(["All Advancements 1.21 v2"], "All Portals", "1.16") == "All Portals 1.16"


def test_shipped_defaults_resolve_to_revisions():
    pinned = PinnedObjectiveSet()
    assert pinned.get_key("All Advancements", "1.21") == "All Advancements 1.21 v2"
    assert pinned.get_key("All Advancements", "1.20") == "All Advancements 1.20 v2"
    assert pinned.try_get_list("All Advancements", "1.21")[3] == "HeavyCore"
    assert pinned.try_get_list("All Blocks", "1.17") is None


def test_try_set_list_reports_changes_only():
    pinned = PinnedObjectiveSet()
    current = pinned.try_get_list("All Advancements", "1.12")

    assert pinned.try_set_list("All Advancements", "1.12", current) is False
    assert pinned.try_set_list("All Advancements", "1.12", list(reversed(current))) is True
    assert pinned.try_get_list("All Advancements", "1.12") == list(reversed(current))
    assert pinned.try_set_list("All Advancements", "1.12", ["EGap"]) is True
    assert pinned.try_set_list("All Advancements", "1.12", ["EGap"]) is False


def test_frame_names_skip_blank_and_missing_objectives():
    frames = _frames("Trident", "  ", "", "EGap") + [_Frame(None)]
    assert frame_names(frames) == ["Trident", "EGap"]


def test_category_kind_falls_back_to_advancements():
    assert CategoryKind.from_name("All Blocks") is CategoryKind.ALL_BLOCKS
    assert CategoryKind.from_name("All Portals") is CategoryKind.ALL_ADVANCEMENTS


def test_availability_for_1_12_default_category():
    available = get_all_available("All Advancements", "1.12")

    for excluded in (
        "Trident", "NautilusShells", "Cats", "Bees", "AncientDebris", "DeepslateEmerald",
        "SculkBlocks", "ArmorTrims", "Sniffers", "HeavyCore", "Cauldrons",
    ):
        assert excluded not in available
    for included in ("GoldBlocks", "Monsters", "Biomes", "EGap"):
        assert included in available


@pytest.mark.parametrize(
    "version, present, absent",
    [
        ("1.17", ["Cauldrons", "AncientDebris", "Bees"], ["ArmorTrims", "HeavyCore"]),
        ("1.17.1", ["AncientDebris"], ["Cauldrons"]),
        ("1.20.5", ["ArmorTrims", "Sniffers"], ["HeavyCore", "Cauldrons"]),
        ("1.21", ["HeavyCore", "ArmorTrims"], ["Cauldrons"]),
        ("24w14a", ["HeavyCore", "Trident"], ["Cauldrons"]),
        ("Snapshot", ["HeavyCore"], ["Cauldrons"]),
    ],
)
def test_availability_gates(version, present, absent):
    available = get_all_available("All Advancements", version)
    for name in present:
        assert name in available
    for name in absent:
        assert name not in available


def test_availability_uses_category_lists():
    blocks = get_all_available("All Blocks", "1.19")
    achievements = get_all_available("All Achievements", "1.11")

    assert "SculkBlocks" in blocks and "DeepslateEmerald" in blocks
    assert "Cats" not in blocks
    assert achievements == ["EGap", "WitherSkulls", "GoldBlocks", "Biomes"]


def test_availability_preserves_base_order():
    available = get_all_available("All Advancements", "1.21")
    assert available[:3] == ["EGap", "Trident", "NautilusShells"]
    assert available[-1] == "HeavyCore"


def test_system_persists_only_on_change(tmp_path):
    world = create_world(category="All Advancements", version="1.21")
    bus = EventBus()
    save_path = Path(tmp_path) / "pinned.json"
    system = PinnedObjectiveSystem(world, bus, save_path=save_path)
    changes = []
    bus.subscribe(EVENT_PINNED_LIST_CHANGED, lambda sender, **payload: changes.append(payload))

    current = system.try_get_current_list()
    assert system.try_set_current_list(_frames(*current)) is False
    assert not save_path.exists()

    assert system.try_set_current_list(_frames("EGap", "Trident")) is True
    with save_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert payload["pinned"]["All Advancements 1.21 v2"] == ["EGap", "Trident"]
    assert changes == [{"key": "All Advancements 1.21 v2", "names": ["EGap", "Trident"]}]


def test_system_merges_saved_lists_over_defaults(tmp_path):
    save_path = Path(tmp_path) / "pinned.json"
    with save_path.open("w", encoding="utf-8") as handle:
        json.dump({"pinned": {"All Advancements 1.16": ["Bees"], "All Portals 1.16": ["EGap"]}}, handle)
    world = create_world(category="All Portals", version="1.16")

    system = PinnedObjectiveSystem(world, EventBus(), save_path=save_path)

    assert system.try_get_list("All Advancements", "1.16") == ["Bees"]
    assert system.try_get_current_list() == ["EGap"]
    # Shipped keys the user never saved are still there.
    assert system.get_key("All Advancements", "1.21") == "All Advancements 1.21 v2"


def test_system_missing_list_falls_back_to_available(tmp_path):
    world = create_world(category="All Blocks", version="1.17")
    system = PinnedObjectiveSystem(world, EventBus(), save_path=Path(tmp_path) / "pinned.json")

    assert system.try_get_current_list() is None
    assert system.current_list_or_available() == get_all_available("All Blocks", "1.17")


def test_system_ignores_malformed_file(tmp_path):
    save_path = Path(tmp_path) / "pinned.json"
    save_path.write_text("{not json", encoding="utf-8")
    world = create_world()

    system = PinnedObjectiveSystem(world, EventBus(), save_path=save_path)

    assert system.current_key() == "All Advancements 1.21 v2"


def test_system_ignores_undecodable_file(tmp_path):
    save_path = Path(tmp_path) / "pinned.json"
    save_path.write_bytes(b'{"pinned": {"All Advancements 1.21 v2": ["\xff"]}}')
    world = create_world()

    system = PinnedObjectiveSystem(world, EventBus(), save_path=save_path)

    assert system.try_get_current_list() == PinnedObjectiveSet().try_get_list("All Advancements", "1.21")


def test_system_read_failure_raises_persistence_error(tmp_path):
    save_path = Path(tmp_path) / "pinned.json"
    save_path.mkdir()

    with pytest.raises(PersistenceError) as excinfo:
        PinnedObjectiveSystem(create_world(), EventBus(), save_path=save_path)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_system_write_failure_raises_persistence_error(tmp_path):
    blocker = Path(tmp_path) / "not_a_folder"
    blocker.write_text("", encoding="utf-8")
    system = PinnedObjectiveSystem(
        create_world(), EventBus(), save_path=blocker / "pinned.json", load_existing=False
    )

    with pytest.raises(PersistenceError) as excinfo:
        system.try_set_current_list(_frames("EGap"))
    assert isinstance(excinfo.value.__cause__, OSError)
    assert excinfo.value.path == blocker / "pinned.json"
