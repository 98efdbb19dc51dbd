"""Quickfilter Facet Builder - Value Sets and Value Records.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Set

@dataclass
class FacetValue:
    """Display state of one categorical value.

    Attributes:
        value: The value string
        selected: Whether the user selected it
        viable: Whether selecting it would leave a non-empty result
        was_viable: Viability before the most recent refresh
    """
    value: str
    selected: bool = False
    viable: bool = True
    was_viable: bool = True

    @property
    def viability_changed(self) -> bool:
        return self.viable != self.was_viable

class ValueSetBuilder:
    """Collects the distinct values held by a set of objects."""

    def __init__(self):
        self._values: Set[str] = set()

    def add(self, values: Iterable[str]) -> None:
        self._values.update(values)

    def __contains__(self, value: str) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def build(self) -> List[str]:
        """Return the distinct values in code point order."""
        return sorted(self._values)

__all__ = ["FacetValue", "ValueSetBuilder"]
