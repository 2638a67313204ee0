"""Read-only game-state snapshots handed to the tracker once per pass."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Tuple
from uuid import UUID

# Players are identified by their account UUID; ordering and hashing come for free.
Uuid = UUID

# Reserved "no player" id, also the single pseudo-player of the manual checklist.
EMPTY_UUID: Uuid = UUID(int=0)

CriterionRef = Tuple[str, str]


@dataclass(frozen=True, slots=True)
class Completion:
    """Player ``player`` satisfied an objective, optionally at ``timestamp``."""

    player: Uuid
    timestamp: Optional[datetime] = None


@dataclass(slots=True)
class Contribution:
    """One player's completed advancements and criteria.

    Criteria are keyed by ``(owner_id, criterion_id)``. Presence of a key means
    completed; the value is the completion time when the source knows it.
    """

    player: Uuid
    advancements: Dict[str, Optional[datetime]] = field(default_factory=dict)
    criteria: Dict[CriterionRef, Optional[datetime]] = field(default_factory=dict)

    def has_advancement(self, advancement_id: str) -> bool:
        return advancement_id in self.advancements

    def has_criterion(self, owner_id: str, criterion_id: str) -> bool:
        return (owner_id, criterion_id) in self.criteria


@dataclass(slots=True)
class WorldState:
    """Every player's contribution plus global presence maps.

    Produced outside the core and never mutated by it.
    """

    players: Dict[Uuid, Contribution] = field(default_factory=dict)
    advancements: Dict[str, Optional[datetime]] = field(default_factory=dict)
    criteria: Dict[CriterionRef, Optional[datetime]] = field(default_factory=dict)

    def first_player(self) -> Uuid | None:
        for player in self.players:
            return player
        return None
