"""Objective variants tracked by the core: advancements and their criteria."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, List

from advtrack.components.snapshot import Completion, Uuid, WorldState
from advtrack.errors import DefinitionError


class ObjectiveKind(Enum):
    """Closed set of objective variants. Switch on this, never on the class."""
    ADVANCEMENT = auto()
    CRITERION = auto()


@dataclass(slots=True)
class Objective:
    """Fields shared by every objective variant."""

    kind: ClassVar[ObjectiveKind]

    id: str
    name: str
    category: str = ""
    icon: str = ""
    completions: List[Completion] = field(default_factory=list, repr=False)

    def is_completed_by(self, player: Uuid) -> bool:
        return any(completion.player == player for completion in self.completions)

    @property
    def completed(self) -> bool:
        return bool(self.completions)


@dataclass(slots=True)
class Criterion(Objective):
    """A sub-goal of exactly one advancement."""

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.CRITERION

    owner_id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise DefinitionError("Criterion is missing an id")
        if not self.owner_id:
            raise DefinitionError(f"Criterion '{self.id}' has no owning advancement")

    @staticmethod
    def make_key(owner_id: str, criterion_id: str) -> str:
        return owner_id + criterion_id

    @property
    def key(self) -> str:
        """Composite lookup key used by the manual checklist."""
        return Criterion.make_key(self.owner_id, self.id)

    def update_state(self, snapshot: WorldState) -> None:
        ref = (self.owner_id, self.id)
        self.completions = [
            Completion(player, contribution.criteria[ref])
            for player, contribution in snapshot.players.items()
            if ref in contribution.criteria
        ]
