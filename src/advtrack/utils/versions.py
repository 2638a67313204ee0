"""Game version parsing and feature gating for pinnable objectives."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

VersionTuple = Tuple[int, ...]

# Two to four dot-separated numeric components ("1.17", "1.20.5").
_VERSION_RE = re.compile(r"^\d+(\.\d+){1,3}$")


def parse_version(text: str | None) -> Optional[VersionTuple]:
    """Return the numeric components of ``text`` or ``None`` for snapshots and junk."""
    if text is None:
        return None
    candidate = text.strip()
    if not _VERSION_RE.match(candidate):
        return None
    return tuple(int(part) for part in candidate.split("."))


def at_least(minimum: str) -> Callable[[Optional[VersionTuple]], bool]:
    required = parse_version(minimum)
    if required is None:
        raise ValueError(f"Invalid minimum version '{minimum}'")

    def _check(current: Optional[VersionTuple]) -> bool:
        # Unparseable versions are treated as the latest snapshot.
        return current is None or current >= required

    return _check


def exactly(version: str) -> Callable[[Optional[VersionTuple]], bool]:
    required = parse_version(version)
    if required is None:
        raise ValueError(f"Invalid version '{version}'")

    def _check(current: Optional[VersionTuple]) -> bool:
        return current == required

    return _check


@dataclass(frozen=True)
class VersionGate:
    feature: str
    available: Callable[[Optional[VersionTuple]], bool]


VERSION_GATES: Tuple[VersionGate, ...] = (
    VersionGate("HeavyCore", at_least("1.21")),
    VersionGate("ArmorTrims", at_least("1.20")),
    VersionGate("Sniffers", at_least("1.20")),
    VersionGate("SculkBlocks", at_least("1.19")),
    VersionGate("Cauldrons", exactly("1.17")),
    VersionGate("DeepslateEmerald", at_least("1.17")),
    VersionGate("AncientDebris", at_least("1.16")),
    VersionGate("Bees", at_least("1.15")),
    VersionGate("Cats", at_least("1.14")),
    VersionGate("Trident", at_least("1.13")),
    VersionGate("NautilusShells", at_least("1.13")),
)


def filter_available(
    names: Iterable[str],
    version: str | None,
    gates: Iterable[VersionGate] = VERSION_GATES,
) -> List[str]:
    """Drop every name whose gate rejects ``version``; ungated names always pass."""
    current = parse_version(version)
    rejected = {gate.feature for gate in gates if not gate.available(current)}
    return [name for name in names if name not in rejected]
