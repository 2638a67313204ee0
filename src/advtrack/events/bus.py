from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float


# ============================================================================
# INPUT & LAYOUT
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"              # payload: x, y
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button
EVENT_LAYOUT_CHANGED = "layout_changed"      # payload: reason=str|None


# ============================================================================
# SNAPSHOTS & AGGREGATION
# ============================================================================
EVENT_SNAPSHOT_READY = "snapshot_ready"      # payload: snapshot=WorldState
EVENT_PROGRESS_UPDATED = "progress_updated"  # payload: snapshot=WorldState, manual=bool


# ============================================================================
# TRACKER CONFIGURATION
# ============================================================================
EVENT_VERSION_CHANGED = "version_changed"            # payload: previous=str|None, version=str
EVENT_CATEGORY_CHANGED = "category_changed"          # payload: previous=str|None, category=str
EVENT_PINNED_LIST_CHANGED = "pinned_list_changed"    # payload: key=str, names=list[str]


# ============================================================================
# MANUAL CHECKLIST
# ============================================================================
EVENT_CHECKLIST_TOGGLED = "checklist_toggled"          # payload: key=str, checked=bool
EVENT_CHECKLIST_CLEARED = "checklist_cleared"          # payload: version=str
EVENT_CHECKLIST_LOADED = "checklist_loaded"            # payload: version=str, count=int
EVENT_CHECKLIST_INVALIDATED = "checklist_invalidated"  # payload: reason=str
