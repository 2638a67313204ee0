"""Tracker state resource describing what is being tracked right now."""
from dataclasses import dataclass

from advtrack.constants import DEFAULT_CATEGORY, DEFAULT_VERSION


@dataclass
class TrackerState:
    """Singleton component storing the active category, game version and checklist flags."""
    category: str = DEFAULT_CATEGORY
    version: str = DEFAULT_VERSION
    manual_checklist_mode: bool = False
    # Set whenever the checklist changed and derived progress must be rebuilt.
    manual_checklist_invalidated: bool = False
