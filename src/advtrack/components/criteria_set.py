from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, MutableMapping, Tuple

from advtrack.components.objective import Criterion
from advtrack.components.snapshot import EMPTY_UUID, Uuid, WorldState
from advtrack.constants import DEFAULT_GOAL
from advtrack.errors import DefinitionError


class CriteriaSet:
    """Criteria owned by one advancement plus per-player progress through them.

    ``progress`` and ``closest_to_completion`` are derived data: every call to
    :meth:`update_states` throws the previous values away and rebuilds them from
    the snapshot it is given.
    """

    def __init__(
        self,
        owner_id: str,
        criteria: Iterable[Criterion] = (),
        *,
        goal: str | None = None,
    ) -> None:
        self.owner_id = owner_id
        self.goal = goal or DEFAULT_GOAL
        self.progress: Dict[Uuid, int] = {}
        self.closest_to_completion: Uuid = EMPTY_UUID
        # Mirrors the tracker's manual checklist flag; refreshed before each pass.
        self.manual_mode = False
        self._all: Dict[str, Criterion] = {}
        for criterion in criteria:
            if criterion.owner_id != owner_id:
                raise DefinitionError(
                    f"Criterion '{criterion.id}' belongs to '{criterion.owner_id}', not '{owner_id}'"
                )
            if criterion.id in self._all:
                raise DefinitionError(f"Duplicate criterion '{criterion.id}' in '{owner_id}'")
            self._all[criterion.id] = criterion

    @property
    def all(self) -> Mapping[str, Criterion]:
        return MappingProxyType(self._all)

    @property
    def any(self) -> bool:
        return bool(self._all)

    @property
    def count(self) -> int:
        return len(self._all)

    @property
    def most_completed(self) -> int:
        return self.number_completed_by(self.closest_to_completion)

    def contains(self, criterion_id: str) -> bool:
        return criterion_id in self._all

    def get(self, criterion_id: str) -> Criterion | None:
        return self._all.get(criterion_id)

    def number_completed_by(self, player: Uuid) -> int:
        if self.manual_mode:
            # The checklist has a single logical player, whatever id is asked for.
            for completed in self.progress.values():
                return completed
            return 0
        return self.progress.get(player, 0)

    def percent_completed_by(self, player: Uuid) -> int:
        if self.count == 0:
            return 0
        return (100 * self.number_completed_by(player)) // self.count

    def update_states(self, snapshot: WorldState) -> None:
        if not self.any:
            return
        self.progress.clear()
        for criterion in self._all.values():
            criterion.update_state(snapshot)
            for completion in criterion.completions:
                self.progress[completion.player] = self.progress.get(completion.player, 0) + 1
        self.find_player_with_most(snapshot)

    def find_player_with_most(self, snapshot: WorldState) -> None:
        if not self.any:
            return
        leader, leader_count = EMPTY_UUID, 0
        for player, completed in self.progress.items():
            # Later players win ties.
            if completed >= leader_count:
                leader, leader_count = player, completed
        if leader == EMPTY_UUID and snapshot.players:
            leader = snapshot.first_player()
        self.closest_to_completion = leader

    def clone_criteria(self, target: MutableMapping[Tuple[str, str], Criterion]) -> None:
        """Copy criterion references into ``target`` keyed by ``(owner_id, criterion_id)``."""
        for criterion_id, criterion in self._all.items():
            target[(self.owner_id, criterion_id)] = criterion
