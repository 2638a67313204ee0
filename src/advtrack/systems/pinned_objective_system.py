from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from esper import World

from advtrack.config.pinned_objectives import (
    PinnedFrame,
    PinnedObjectiveSet,
    frame_names,
    get_all_available,
)
from advtrack.constants import DATA_DIR, PINNED_FILE_NAME
from advtrack.errors import PersistenceError
from advtrack.events.bus import EVENT_PINNED_LIST_CHANGED, EventBus
from advtrack.utils.tracker_state import get_tracker_state

logger = logging.getLogger(__name__)


class PinnedObjectiveSystem:
    """Resolves and persists the pinned objectives of the active category and version."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        save_path: Path | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._save_path = Path(save_path) if save_path is not None else DATA_DIR / PINNED_FILE_NAME
        self.pinned = PinnedObjectiveSet()
        if load_existing:
            self.load()

    @property
    def save_path(self) -> Path:
        return self._save_path

    def load(self) -> None:
        """Overlay persisted lists on the shipped defaults."""
        self.pinned = PinnedObjectiveSet()
        try:
            with self._save_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Ignoring malformed pinned objectives file %s", self._save_path)
            return
        except OSError as exc:
            raise PersistenceError(self._save_path, "Could not read pinned objectives") from exc
        stored = payload.get("pinned") if isinstance(payload, dict) else None
        if isinstance(stored, dict):
            self.pinned.merge({
                key: names for key, names in stored.items() if isinstance(names, list)
            })
        logger.info("Loaded pinned objectives from %s", self._save_path)

    def save(self) -> None:
        try:
            self._save_path.parent.mkdir(parents=True, exist_ok=True)
            with self._save_path.open("w", encoding="utf-8") as handle:
                json.dump(self.pinned.to_payload(), handle, indent=2)
        except OSError as exc:
            raise PersistenceError(self._save_path, "Could not write pinned objectives") from exc

    def get_all_available(self) -> List[str]:
        state = get_tracker_state(self.world)
        return get_all_available(state.category, state.version)

    def get_key(self, category: str, version: str) -> str:
        return self.pinned.get_key(category, version)

    def current_key(self) -> str:
        state = get_tracker_state(self.world)
        return self.pinned.get_key(state.category, state.version)

    def try_get_list(self, category: str, version: str) -> List[str] | None:
        return self.pinned.try_get_list(category, version)

    def try_get_current_list(self) -> List[str] | None:
        state = get_tracker_state(self.world)
        return self.pinned.try_get_list(state.category, state.version)

    def current_list_or_available(self) -> List[str]:
        """Pinned list for the active key, or everything pinnable when none is stored."""
        names = self.try_get_current_list()
        if names is None:
            return self.get_all_available()
        return names

    def try_set_current_list(self, frames: Iterable[PinnedFrame]) -> bool:
        """Store the names shown by ``frames``; persists and returns ``True`` only on change."""
        state = get_tracker_state(self.world)
        names = frame_names(frames)
        if not self.pinned.try_set_list(state.category, state.version, names):
            return False
        self.save()
        key = self.current_key()
        logger.info("Pinned objectives for '%s' changed", key)
        self.event_bus.emit(EVENT_PINNED_LIST_CHANGED, key=key, names=list(names))
        return True
