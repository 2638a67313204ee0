from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from advtrack.components.checkable import CheckableControl, Rect


class CheckableRegistry:
    """Lookup tables over the checkable items of the current layout.

    Items are indexed by checklist key and bucketed by the bounds of their parent
    panel so hit-testing only looks inside panels under the pointer. Both tables
    are rebuilt in full on every layout change.
    """

    def __init__(self) -> None:
        self._controls: List[CheckableControl] = []
        self._by_key: Dict[str, CheckableControl] = {}
        self._by_bounds: Dict[Rect, List[CheckableControl]] = {}

    def rebuild(self, controls: Iterable[CheckableControl]) -> None:
        self._controls = list(controls)
        self._by_key.clear()
        self._by_bounds.clear()
        for control in self._controls:
            self._by_key[control.key] = control
            self._by_bounds.setdefault(control.parent_bounds, []).append(control)

    def __len__(self) -> int:
        return len(self._controls)

    def get(self, key: str) -> CheckableControl | None:
        return self._by_key.get(key)

    def controls(self) -> Tuple[CheckableControl, ...]:
        return tuple(self._controls)

    def buckets(self) -> Tuple[Rect, ...]:
        return tuple(self._by_bounds)

    def hit_test(self, x: float, y: float) -> CheckableControl | None:
        for bounds, controls in self._by_bounds.items():
            if not bounds.contains(x, y):
                continue
            for control in controls:
                if control.check_bounds.contains(x, y):
                    return control
        return None
