"""Quickfilter Categorical Facet - Discrete-Valued Filtering.

A categorical filter offers every distinct value its facet projects
from the collection.  Selecting values keeps the objects that hold at
least one of them; selecting nothing keeps everything.

After each recomputation the filter marks which of its values are
still viable: a value is viable if some object holding it is either
matched by every filter, or missed by this filter alone.  Objects
missed by two or more filters cannot be rescued by changing this
filter, so they do not contribute.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence

from quickfilter_core.facets.base import (
    Facet,
    Filter,
    Predicate,
    RefreshMode,
    match_all,
)
from quickfilter_core.facets.builder import FacetValue, ValueSetBuilder
from quickfilter_core.facets.projection import ProjectionSpec, project_all

logger = logging.getLogger(__name__)


class CheckState(Enum):
    """How a value's check mark should be drawn.

    SHADED marks unselected values of a pass-all filter: functionally
    the same as every value being selected, but drawn as neutral.
    """

    CHECKED = "checked"
    SHADED = "shaded"
    CLEAR = "clear"


class Categorical(Facet):
    """Facet over a discrete set of string values.

    Args:
        name: Unique facet name
        proj: Attribute name or callable returning one string or a list
            of strings per object
        initial: Values selected when no saved state overrides them
    """

    def __init__(
        self,
        name: str,
        proj: ProjectionSpec,
        initial: Optional[Iterable[str]] = None,
    ):
        if isinstance(initial, str):
            initial = [initial]
        super().__init__(name, proj, frozenset(initial or ()))

    def create_filter(
        self,
        objects: Sequence[Any],
        saved_state: Any = None,
        strict: bool = True,
    ) -> "CategoricalFilter":
        return CategoricalFilter(self, objects, saved_state, strict)


class CategoricalFilter(Filter):
    """Live selection state of a categorical facet."""

    def __init__(
        self,
        facet: Categorical,
        objects: Sequence[Any],
        saved_state: Any = None,
        strict: bool = True,
    ):
        super().__init__(facet, objects)

        # Objects are static, so project them once
        self._obj_values: List[List[str]] = project_all(
            facet.projection, objects, facet.name, strict
        )

        domain = ValueSetBuilder()
        for values in self._obj_values:
            domain.add(values)

        if saved_state is not None and not isinstance(saved_state, Mapping):
            logger.debug(
                f"Ignoring saved state for facet {facet.name!r}: "
                f"expected a mapping, got {type(saved_state).__name__}"
            )
            saved_state = None

        self._values: List[FacetValue] = []
        self._positions: Dict[str, int] = {}
        for value in domain.build():
            self._positions[value] = len(self._values)
            self._values.append(FacetValue(
                value=value,
                selected=self._initial_selected(value, saved_state),
            ))

        self._shaded = self.is_pass_all()

    def _initial_selected(self, value: str, saved_state: Optional[Mapping]) -> bool:
        if saved_state is not None:
            saved = saved_state.get(value)
            if isinstance(saved, bool):
                return saved
            if saved is not None:
                logger.debug(
                    f"Ignoring saved selection {saved!r} for value {value!r} "
                    f"of facet {self.name!r}"
                )
        return value in self.facet.initial

    @property
    def values(self) -> List[FacetValue]:
        """Value records in display order."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def object_values(self, index: int) -> List[str]:
        """Get the values projected from one object."""
        return list(self._obj_values[index])

    def index_of(self, value: str) -> int:
        """Get the position of a value.

        Raises:
            KeyError: If no object holds the value
        """
        try:
            return self._positions[value]
        except KeyError:
            raise KeyError(f"Facet {self.name!r} has no value {value!r}") from None

    def _record(self, index: int) -> FacetValue:
        # Positions are never negative
        if index < 0:
            raise IndexError(f"Value index out of range: {index}")
        return self._values[index]

    def selected_values(self) -> FrozenSet[str]:
        return frozenset(v.value for v in self._values if v.selected)

    def viable_values(self) -> List[str]:
        return [v.value for v in self._values if v.viable]

    @property
    def any_viable(self) -> bool:
        """Whether any value is viable; the facet heading hides otherwise."""
        return any(v.viable for v in self._values)

    def is_pass_all(self) -> bool:
        return not any(v.selected for v in self._values)

    def check_state(self, index: int) -> CheckState:
        """Get how the check mark of a value should be drawn.

        Shading reflects the state at the most recent refresh.
        """
        if self._record(index).selected:
            return CheckState.CHECKED
        return CheckState.SHADED if self._shaded else CheckState.CLEAR

    def toggle(self, index: int) -> bool:
        """Toggle a value's selection, as a click on its row would.

        Non-viable values ignore the toggle.

        Returns:
            True if the selection changed

        Raises:
            IndexError: If no value has that position
        """
        record = self._record(index)
        if not record.viable:
            return False
        record.selected = not record.selected
        return True

    def set_selected(self, index: int, selected: bool) -> bool:
        """Set a value's selection regardless of viability.

        Returns:
            True if the selection changed

        Raises:
            IndexError: If no value has that position
        """
        record = self._record(index)
        if record.selected == selected:
            return False
        record.selected = selected
        return True

    def select(self, values: Iterable[str], selected: bool = True) -> int:
        """Set the selection of several values by name.

        Values no object holds are ignored.

        Returns:
            Number of values whose selection changed
        """
        if isinstance(values, str):
            values = [values]
        changed = 0
        for value in values:
            position = self._positions.get(value)
            if position is None:
                logger.debug(f"Facet {self.name!r} has no value {value!r}; ignoring")
                continue
            if self.set_selected(position, selected):
                changed += 1
        return changed

    def reset(self) -> None:
        for record in self._values:
            record.selected = False

    def make_predicate(self) -> Predicate:
        if self.is_pass_all():
            return match_all

        selected = self.selected_values()
        obj_values = self._obj_values

        def predicate(index: int) -> bool:
            # Object matches if any of its values is selected
            for value in obj_values[index]:
                if value in selected:
                    return True
            return False

        return predicate

    def refresh(
        self,
        matched: List[bool],
        missed: List[Optional[Filter]],
        mode: RefreshMode = RefreshMode.INCREMENTAL,
    ) -> None:
        viable = ValueSetBuilder()
        for i, is_matched in enumerate(matched):
            if is_matched or missed[i] is self:
                viable.add(self._obj_values[i])

        for record in self._values:
            now_viable = record.value in viable
            # The initial refresh shows the final state with no transition
            record.was_viable = now_viable if mode is RefreshMode.INITIAL else record.viable
            record.viable = now_viable

        self._shaded = self.is_pass_all()

    def get_save_state(self) -> Dict[str, bool]:
        return {v.value: v.selected for v in self._values}


__all__ = ["CheckState", "Categorical", "CategoricalFilter"]
