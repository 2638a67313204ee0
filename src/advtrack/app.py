"""Composition root wiring the tracker world, event bus and systems together.

The host application (window, snapshot poller) owns a :class:`TrackerApp` and
forwards its ticks, snapshots, pointer input and layout changes to it.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from advtrack.components.snapshot import WorldState
from advtrack.constants import DATA_DIR, DEFAULT_CATEGORY, DEFAULT_VERSION, PINNED_FILE_NAME, CHECKLIST_FOLDER_NAME
from advtrack.events.bus import (
    EVENT_LAYOUT_CHANGED,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_SNAPSHOT_READY,
    EVENT_TICK,
    EventBus,
)
from advtrack.systems.manual_checklist_system import ManualChecklistSystem
from advtrack.systems.pinned_objective_system import PinnedObjectiveSystem
from advtrack.systems.progress_system import ProgressSystem
from advtrack.utils.tracker_state import (
    get_tracker_state,
    set_category,
    set_manual_checklist_mode,
    set_version,
)
from advtrack.world import create_world


class TrackerApp:
    def __init__(
        self,
        *,
        data_dir: Path | None = None,
        category: str = DEFAULT_CATEGORY,
        version: str = DEFAULT_VERSION,
        manual_checklist_mode: bool = False,
        definitions: Iterable[Mapping[str, Any]] | None = None,
        definitions_path: Path | None = None,
    ) -> None:
        data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.event_bus = EventBus()
        self.world = create_world(
            category=category,
            version=version,
            manual_checklist_mode=manual_checklist_mode,
            definitions=definitions,
            definitions_path=definitions_path,
        )
        # Checklist first so the progress system can read from it.
        self.checklist_system = ManualChecklistSystem(
            self.world,
            self.event_bus,
            folder=data_dir / CHECKLIST_FOLDER_NAME,
        )
        self.progress_system = ProgressSystem(
            self.world,
            self.event_bus,
            checklist=self.checklist_system,
        )
        self.pinned_objective_system = PinnedObjectiveSystem(
            self.world,
            self.event_bus,
            save_path=data_dir / PINNED_FILE_NAME,
        )

    @property
    def state(self):
        return get_tracker_state(self.world)

    def tick(self, dt: float = 1 / 60) -> None:
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def submit_snapshot(self, snapshot: WorldState) -> None:
        self.event_bus.emit(EVENT_SNAPSHOT_READY, snapshot=snapshot)

    def mouse_move(self, x: float, y: float) -> None:
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y)

    def mouse_press(self, x: float, y: float, button: int = 1) -> None:
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def layout_changed(self, reason: str | None = None) -> None:
        self.event_bus.emit(EVENT_LAYOUT_CHANGED, reason=reason)

    def switch_version(self, version: str) -> None:
        set_version(self.world, self.event_bus, version)

    def switch_category(self, category: str) -> None:
        set_category(self.world, self.event_bus, category)

    def set_manual_checklist_mode(self, enabled: bool) -> None:
        set_manual_checklist_mode(self.world, enabled)
