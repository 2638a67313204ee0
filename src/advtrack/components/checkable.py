from __future__ import annotations

from dataclasses import dataclass

from advtrack.components.objective import Objective, ObjectiveKind


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned layout rectangle; right and bottom edges are exclusive."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.right and self.y <= py < self.bottom

    def inflate(self, amount: float) -> "Rect":
        return Rect(self.x - amount, self.y - amount, self.width + amount * 2, self.height + amount * 2)


@dataclass(slots=True)
class CheckableControl:
    """A UI item that can be ticked off by hand while the manual checklist is active.

    ``parent_bounds`` is the bounding box of the containing panel and is used as
    the coarse hit-test bucket; ``check_bounds`` is the clickable area itself.
    """

    objective: Objective
    parent_bounds: Rect
    check_bounds: Rect
    is_checked: bool = False

    @property
    def key(self) -> str:
        if self.objective.kind is ObjectiveKind.CRITERION:
            return self.objective.key
        return self.objective.id

    @property
    def toggleable(self) -> bool:
        """Leaves only: advancements with criteria derive their state from their children."""
        if self.objective.kind is ObjectiveKind.CRITERION:
            return True
        if self.objective.kind is ObjectiveKind.ADVANCEMENT:
            return not self.objective.has_criteria
        return False

    @property
    def highlightable(self) -> bool:
        if self.objective.kind is ObjectiveKind.ADVANCEMENT:
            return not (self.objective.has_criteria or self.objective.is_root)
        return self.objective.kind is ObjectiveKind.CRITERION


@dataclass(slots=True)
class ChecklistHighlight:
    """Outline around the hovered checkable item, consumed by the renderer."""

    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    key: str = ""
