"""Pinned-objective lists keyed by category, game version and optional revision."""
from __future__ import annotations

from collections import abc
from copy import deepcopy
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

from advtrack.constants import (
    CATEGORY_ALL_ACHIEVEMENTS,
    CATEGORY_ALL_ADVANCEMENTS,
    CATEGORY_ALL_BLOCKS,
    DEFAULT_PINNED,
    FIRST_PINNED_REVISION,
    PINNABLE_ALL_ACHIEVEMENTS,
    PINNABLE_ALL_ADVANCEMENTS,
    PINNABLE_ALL_BLOCKS,
)
from advtrack.utils.versions import filter_available


class CategoryKind(Enum):
    ALL_ADVANCEMENTS = CATEGORY_ALL_ADVANCEMENTS
    ALL_BLOCKS = CATEGORY_ALL_BLOCKS
    ALL_ACHIEVEMENTS = CATEGORY_ALL_ACHIEVEMENTS

    @classmethod
    def from_name(cls, name: str | None) -> "CategoryKind":
        """Custom categories share the advancement lists."""
        for kind in cls:
            if kind.value == name:
                return kind
        return cls.ALL_ADVANCEMENTS


_PINNABLE: Mapping[CategoryKind, Sequence[str]] = {
    CategoryKind.ALL_ADVANCEMENTS: PINNABLE_ALL_ADVANCEMENTS,
    CategoryKind.ALL_BLOCKS: PINNABLE_ALL_BLOCKS,
    CategoryKind.ALL_ACHIEVEMENTS: PINNABLE_ALL_ACHIEVEMENTS,
}


def get_all_available(category: str | None, version: str | None) -> List[str]:
    """Pinnable short-names for ``category`` that exist in game ``version``."""
    base = _PINNABLE[CategoryKind.from_name(category)]
    return filter_available(base, version)


def resolve_key(keys: Iterable[str] | Mapping[str, object], category: str, version: str) -> str:
    """Return the key of the newest revision of ``"{category} {version}"`` present in ``keys``.

    Revisions are probed as ``v2``, ``v3``, ... and the search stops at the first
    missing one. Without any revision the unrevisioned key is returned as-is.
    """
    known = keys if isinstance(keys, (set, frozenset, abc.Mapping)) else set(keys)
    base = f"{category} {version}"
    key = base
    revision = FIRST_PINNED_REVISION
    while f"{base} v{revision}" in known:
        key = f"{base} v{revision}"
        revision += 1
    return key


class PinnedObjective(Protocol):
    name: str


class PinnedFrame(Protocol):
    """Anything the UI hands back for a pinned slot; only ``objective.name`` is read."""

    objective: Optional[PinnedObjective]


def frame_names(frames: Iterable[PinnedFrame]) -> List[str]:
    names: List[str] = []
    for frame in frames:
        objective = getattr(frame, "objective", None)
        name = getattr(objective, "name", None)
        if name and name.strip():
            names.append(name)
    return names


class PinnedObjectiveSet:
    """In-memory pinned lists: shipped defaults overlaid with the user's own lists."""

    def __init__(self, pinned: Mapping[str, Sequence[str]] | None = None, *, include_defaults: bool = True) -> None:
        self.pinned: Dict[str, List[str]] = deepcopy(DEFAULT_PINNED) if include_defaults else {}
        if pinned:
            self.merge(pinned)

    def merge(self, pinned: Mapping[str, Sequence[str]]) -> None:
        for key, names in pinned.items():
            self.pinned[str(key)] = [str(name) for name in names]

    def get_key(self, category: str, version: str) -> str:
        return resolve_key(self.pinned, category, version)

    def try_get_list(self, category: str, version: str) -> List[str] | None:
        names = self.pinned.get(self.get_key(category, version))
        return list(names) if names is not None else None

    def try_set_list(self, category: str, version: str, names: Sequence[str]) -> bool:
        """Store ``names`` for the resolved key; ``False`` when the sequence is unchanged."""
        key = self.get_key(category, version)
        previous = self.pinned.get(key, [])
        updated = list(names)
        if updated == previous:
            return False
        self.pinned[key] = updated
        return True

    def to_payload(self) -> Dict[str, Dict[str, List[str]]]:
        return {"pinned": {key: list(names) for key, names in self.pinned.items()}}
