from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from advtrack.components.criteria_set import CriteriaSet
from advtrack.components.objective import Objective, ObjectiveKind
from advtrack.components.snapshot import Completion, WorldState
from advtrack.constants import ROOT_SUFFIX
from advtrack.errors import DefinitionError


@dataclass(slots=True)
class Advancement(Objective):
    """Top-level objective; exclusively owns its :class:`CriteriaSet`."""

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.ADVANCEMENT

    criteria: CriteriaSet | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise DefinitionError("Advancement is missing an id")
        if self.criteria is None:
            self.criteria = CriteriaSet(self.id)
        elif self.criteria.owner_id != self.id:
            raise DefinitionError(
                f"Criteria for '{self.criteria.owner_id}' attached to advancement '{self.id}'"
            )

    @property
    def has_criteria(self) -> bool:
        return self.criteria.any

    @property
    def is_root(self) -> bool:
        return self.id.endswith(ROOT_SUFFIX)

    def update_state(self, snapshot: WorldState) -> None:
        self.completions = [
            Completion(player, contribution.advancements[self.id])
            for player, contribution in snapshot.players.items()
            if self.id in contribution.advancements
        ]
