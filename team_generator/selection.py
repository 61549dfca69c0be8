"""
Multi-select dropdown state as a value plus a pure reducer.

Checking the "all" sentinel clears every other key; checking any other key
clears "all". Unchecking simply removes the key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from team_generator.constants import ALL_SENTINEL


@dataclass(frozen=True)
class Selection:
    keys: FrozenSet[str] = frozenset()

    @property
    def unrestricted(self) -> bool:
        return not self.keys or ALL_SENTINEL in self.keys

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(sorted(self.keys))


def reduce_selection(selection: Selection, key: str, checked: bool) -> Selection:
    if not checked:
        return Selection(selection.keys - {key})
    if key == ALL_SENTINEL:
        return Selection(frozenset({ALL_SENTINEL}))
    return Selection((selection.keys - {ALL_SENTINEL}) | {key})
