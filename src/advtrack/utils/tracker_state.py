from __future__ import annotations

from esper import World

from advtrack.components.advancement import Advancement
from advtrack.components.tracker_state import TrackerState
from advtrack.events.bus import EVENT_CATEGORY_CHANGED, EVENT_VERSION_CHANGED, EventBus


def get_tracker_state(world: World) -> TrackerState:
    """Return the singleton tracker state, creating a default one if missing."""
    for _, state in world.get_component(TrackerState):
        return state
    state = TrackerState()
    world.create_entity(state)
    return state


def set_version(world: World, event_bus: EventBus, version: str) -> None:
    """Switch the tracked game version and emit a change event when it differs."""
    state = get_tracker_state(world)
    previous = state.version
    if previous == version:
        return
    state.version = version
    event_bus.emit(EVENT_VERSION_CHANGED, previous=previous, version=version)


def set_category(world: World, event_bus: EventBus, category: str) -> None:
    """Switch the tracked category and emit a change event when it differs."""
    state = get_tracker_state(world)
    previous = state.category
    if previous == category:
        return
    state.category = category
    event_bus.emit(EVENT_CATEGORY_CHANGED, previous=previous, category=category)


def set_manual_checklist_mode(world: World, enabled: bool) -> None:
    state = get_tracker_state(world)
    if state.manual_checklist_mode == enabled:
        return
    state.manual_checklist_mode = enabled
    state.manual_checklist_invalidated = True
    for _, advancement in world.get_component(Advancement):
        advancement.criteria.manual_mode = enabled
