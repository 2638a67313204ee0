from __future__ import annotations

import logging
from typing import Dict, Tuple

from esper import World

from advtrack.components.advancement import Advancement
from advtrack.components.objective import Criterion
from advtrack.components.snapshot import WorldState
from advtrack.events.bus import (
    EVENT_PROGRESS_UPDATED,
    EVENT_SNAPSHOT_READY,
    EVENT_TICK,
    EventBus,
)
from advtrack.systems.manual_checklist_system import ManualChecklistSystem
from advtrack.utils.objectives import criteria_index
from advtrack.utils.tracker_state import get_tracker_state

logger = logging.getLogger(__name__)


class ProgressSystem:
    """Reduces each snapshot to per-advancement and per-criteria-set completion metrics.

    Every pass is a full re-derivation. While the manual checklist is active,
    snapshots from the game are ignored and the checklist's synthetic snapshot is
    used instead, rebuilt on the first tick after the checklist changed.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        checklist: ManualChecklistSystem | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.checklist = checklist
        self._last_snapshot: WorldState = WorldState()
        self.event_bus.subscribe(EVENT_SNAPSHOT_READY, self.on_snapshot_ready)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def last_snapshot(self) -> WorldState:
        return self._last_snapshot

    def on_snapshot_ready(self, sender, **payload) -> None:
        snapshot = payload.get("snapshot")
        if snapshot is None:
            return
        if get_tracker_state(self.world).manual_checklist_mode:
            return
        self.update(snapshot)

    def on_tick(self, sender, **payload) -> None:
        state = get_tracker_state(self.world)
        if not (state.manual_checklist_mode and state.manual_checklist_invalidated):
            return
        if self.checklist is None:
            return
        state.manual_checklist_invalidated = False
        self.update(self.checklist.get_current_state())

    def update(self, snapshot: WorldState) -> None:
        manual = get_tracker_state(self.world).manual_checklist_mode
        advancements = 0
        for _, advancement in self.world.get_component(Advancement):
            advancement.update_state(snapshot)
            advancement.criteria.manual_mode = manual
            advancement.criteria.update_states(snapshot)
            advancements += 1
        self._last_snapshot = snapshot
        logger.debug(
            "Progress pass over %d advancements for %d players (manual=%s)",
            advancements,
            len(snapshot.players),
            manual,
        )
        self.event_bus.emit(EVENT_PROGRESS_UPDATED, snapshot=snapshot, manual=manual)

    def criteria_index(self) -> Dict[Tuple[str, str], Criterion]:
        return criteria_index(self.world)
