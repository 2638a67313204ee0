from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from esper import World

from advtrack.components.checkable import CheckableControl, ChecklistHighlight
from advtrack.components.snapshot import EMPTY_UUID, Contribution, WorldState
from advtrack.constants import (
    CHECKLIST_FILE_PATTERN,
    CHECKLIST_FOLDER_NAME,
    DATA_DIR,
    HIGHLIGHT_INFLATE,
    ROOT_NAMESPACE,
    ROOT_SECTIONS,
    ROOT_SUFFIX,
)
from advtrack.errors import PersistenceError
from advtrack.events.bus import (
    EVENT_CATEGORY_CHANGED,
    EVENT_CHECKLIST_CLEARED,
    EVENT_CHECKLIST_INVALIDATED,
    EVENT_CHECKLIST_LOADED,
    EVENT_CHECKLIST_TOGGLED,
    EVENT_LAYOUT_CHANGED,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_VERSION_CHANGED,
    EventBus,
)
from advtrack.ui.checkable_registry import CheckableRegistry
from advtrack.utils.objectives import advancement_index, criteria_index
from advtrack.utils.tracker_state import get_tracker_state

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1


class ManualChecklistSystem:
    """Hand-maintained completion state that stands in for data read from the game.

    Checked keys are advancement ids or ``owner_id + criterion_id`` composites,
    persisted one per line in a file per game version.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        folder: Path | None = None,
        namespace: str = ROOT_NAMESPACE,
        sections: Iterable[str] = ROOT_SECTIONS,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._folder = Path(folder) if folder is not None else DATA_DIR / CHECKLIST_FOLDER_NAME
        self._namespace = namespace
        self._sections = tuple(sections)
        # dict keeps insertion order for the file; values are unused.
        self._checks: Dict[str, None] = {}
        self.registry = CheckableRegistry()
        self._hovered: Optional[CheckableControl] = None
        self._highlight_entity: Optional[int] = None
        self._highlight = self._ensure_highlight()

        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_LAYOUT_CHANGED, self.on_layout_changed)
        self.event_bus.subscribe(EVENT_VERSION_CHANGED, self.on_tracking_changed)
        self.event_bus.subscribe(EVENT_CATEGORY_CHANGED, self.on_tracking_changed)

        if load_existing:
            self.load()

    def _ensure_highlight(self) -> ChecklistHighlight:
        entries = list(self.world.get_component(ChecklistHighlight))
        if entries:
            self._highlight_entity, highlight = entries[0]
            return highlight
        self._highlight_entity = self.world.create_entity(ChecklistHighlight())
        return self.world.component_for_entity(self._highlight_entity, ChecklistHighlight)

    @property
    def checklist_path(self) -> Path:
        version = get_tracker_state(self.world).version
        return self._folder / CHECKLIST_FILE_PATTERN.format(version=version)

    @property
    def hovered(self) -> Optional[CheckableControl]:
        return self._hovered

    @property
    def highlight(self) -> ChecklistHighlight:
        return self._highlight

    def is_checked(self, key: str) -> bool:
        return key in self._checks

    def checked_keys(self) -> List[str]:
        return list(self._checks)

    # Persistence --------------------------------------------------------

    def _read_keys(self) -> List[str]:
        path = self.checklist_path
        try:
            # Undecodable bytes become U+FFFD so the damaged line can be dropped.
            with path.open("r", encoding="utf-8", errors="replace") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise PersistenceError(path, "Could not read checklist") from exc
        return [line.strip() for line in lines if line.strip() and "\ufffd" not in line]

    def load(self) -> None:
        self._checks = dict.fromkeys(self._read_keys())
        self._sync_controls()
        logger.info("Loaded %d checklist entries from %s", len(self._checks), self.checklist_path)
        self.event_bus.emit(
            EVENT_CHECKLIST_LOADED,
            version=get_tracker_state(self.world).version,
            count=len(self._checks),
        )

    def save(self) -> None:
        self._update_root_advancements()
        path = self.checklist_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                for key in self._checks:
                    handle.write(key + "\n")
        except OSError as exc:
            raise PersistenceError(path, "Could not write checklist") from exc

    def _update_root_advancements(self) -> None:
        for section in self._sections:
            prefix = f"{self._namespace}:{section}/"
            root = f"{self._namespace}:{section}{ROOT_SUFFIX}"
            self._checks.pop(root, None)
            if any(key.startswith(prefix) for key in self._checks):
                self._checks[root] = None

    # Mutation -----------------------------------------------------------

    def toggle(self, key: str) -> bool:
        """Flip ``key`` and persist; returns whether it is now checked."""
        if key in self._checks:
            del self._checks[key]
            checked = False
        else:
            self._checks[key] = None
            checked = True
        self.save()
        self._sync_controls()
        logger.info("Checklist %s '%s'", "checked" if checked else "unchecked", key)
        self.event_bus.emit(EVENT_CHECKLIST_TOGGLED, key=key, checked=checked)
        self._mark_invalidated("toggled")
        return checked

    def clear(self) -> None:
        self._checks.clear()
        self.save()
        self._sync_controls()
        self.event_bus.emit(EVENT_CHECKLIST_CLEARED, version=get_tracker_state(self.world).version)
        self._mark_invalidated("cleared")

    def _mark_invalidated(self, reason: str) -> None:
        get_tracker_state(self.world).manual_checklist_invalidated = True
        self.event_bus.emit(EVENT_CHECKLIST_INVALIDATED, reason=reason)

    def _sync_controls(self) -> None:
        for control in self.registry.controls():
            control.is_checked = control.key in self._checks

    # Snapshot reconstruction ---------------------------------------------

    def get_current_state(self) -> WorldState:
        """Rebuild a snapshot from the persisted checklist for the pseudo-player."""
        if not self.checklist_path.exists():
            return WorldState()
        advancements = advancement_index(self.world)
        criteria = {criterion.key: criterion for criterion in criteria_index(self.world).values()}
        state = WorldState()
        for key in self._read_keys():
            if key in advancements:
                state.advancements.setdefault(key, None)
                continue
            criterion = criteria.get(key)
            if criterion is not None:
                state.criteria.setdefault((criterion.owner_id, criterion.id), None)
            # Anything else was removed from the game data; ignore it.
        state.players[EMPTY_UUID] = Contribution(
            EMPTY_UUID,
            advancements=state.advancements,
            criteria=state.criteria,
        )
        return state

    # Layout and pointer ---------------------------------------------------

    def invalidate(self) -> None:
        """Rebuild the lookup tables from the checkable items currently in the world."""
        self.registry.rebuild(control for _, control in self.world.get_component(CheckableControl))
        if self._hovered is not None and self.registry.get(self._hovered.key) is not self._hovered:
            self._set_hovered(None)
        self._sync_controls()
        logger.debug("Checklist layout rebuilt with %d items", len(self.registry))
        self._mark_invalidated("layout")

    def on_layout_changed(self, sender, **payload) -> None:
        self.invalidate()

    def on_tracking_changed(self, sender, **payload) -> None:
        self.load()
        self._mark_invalidated("tracking")

    def on_mouse_move(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        self.handle_mouse_move(float(x), float(y))

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        self.handle_mouse_press(float(x), float(y), int(button))

    def handle_mouse_move(self, x: float, y: float) -> None:
        if not get_tracker_state(self.world).manual_checklist_mode:
            self._set_hovered(None)
            return
        self._set_hovered(self.registry.hit_test(x, y))

    def handle_mouse_press(self, x: float, y: float, button: int) -> bool:
        """Toggle the item under the pointer; returns whether anything was toggled."""
        if button != LEFT_BUTTON:
            return False
        self.handle_mouse_move(x, y)
        control = self._hovered
        if control is None or not control.toggleable:
            return False
        self.toggle(control.key)
        return True

    def _set_hovered(self, control: Optional[CheckableControl]) -> None:
        if control is not self._hovered:
            logger.debug("Checklist hover %s", control.key if control is not None else None)
        self._hovered = control
        highlight = self._highlight
        if control is None or not control.highlightable:
            highlight.visible = False
            highlight.key = ""
            highlight.x = highlight.y = highlight.width = highlight.height = 0.0
            return
        bounds = control.check_bounds.inflate(HIGHLIGHT_INFLATE)
        highlight.visible = True
        highlight.key = control.key
        highlight.x = bounds.x
        highlight.y = bounds.y
        highlight.width = bounds.width
        highlight.height = bounds.height

