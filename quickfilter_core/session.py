"""Quickfilter Session - Top-Level Faceted Filtering Controller.

A Quickfilter owns the object collection, its facets and their live
filters.  It restores filter state from a state store, recomputes the
match set whenever a selection changes, saves the new state and hands
the result to an ``on_change`` callback.

Example::

    qf = Quickfilter(
        products,
        [Categorical("Color", "color"), FreeText("Search", "title")],
        on_change=render,
    )
    qf.toggle("Color", qf.filter("Color").index_of("red"))
    qf.set_query("Search", "cotton sh")

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from quickfilter_core.engine import FilterEngine, RefreshResult
from quickfilter_core.errors import DuplicateFacetError, UnknownFacetError
from quickfilter_core.facets.base import Facet, Filter, RefreshMode
from quickfilter_core.facets.categorical import CategoricalFilter
from quickfilter_core.facets.freetext import FreeTextFilter
from quickfilter_core.storage.backend import StateStore
from quickfilter_core.storage.codec import decode_state, encode_state

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Sequence[Any], List[bool]], None]


@dataclass
class SessionConfig:
    """Session configuration.

    Attributes:
        auto_refresh: Refresh immediately after each selection change made
            through the session; when off, the caller batches changes and
            calls refresh() itself
        persist_state: Save filter state to the state store after each refresh
        strict_projection: Reject non-string projected values instead of
            converting them with str()
        state_indent: JSON indent for saved state, None for compact
    """

    auto_refresh: bool = True
    persist_state: bool = True
    strict_projection: bool = True
    state_indent: Optional[int] = None


class Quickfilter:
    """Faceted filtering session.

    Construction restores saved state and runs the initial refresh, so
    ``on_change`` is called once before the constructor returns.

    Args:
        objects: Object collection; order and contents must not change
        facets: Facets, in evaluation and display order
        on_change: Called as ``on_change(objects, matched)`` after every
            refresh
        state_store: Where to load and save filter state
        config: Session configuration

    Raises:
        DuplicateFacetError: If two facets share a name
        ProjectionError: If a categorical projection yields non-strings
    """

    def __init__(
        self,
        objects: Sequence[Any],
        facets: Sequence[Facet],
        on_change: Optional[ChangeCallback] = None,
        state_store: Optional[StateStore] = None,
        config: Optional[SessionConfig] = None,
    ):
        self.config = config or SessionConfig()
        self._objects = objects
        self._facets = list(facets)
        self._on_change = on_change
        self._state_store = state_store
        self._last_result: Optional[RefreshResult] = None

        seen = set()
        for facet in self._facets:
            if facet.name in seen:
                raise DuplicateFacetError(facet.name)
            seen.add(facet.name)

        saved_state = decode_state(state_store.load()) if state_store else {}
        unknown = set(saved_state) - seen
        if unknown:
            logger.debug(f"Ignoring saved state for unknown facets: {sorted(unknown)}")

        self._filters: List[Filter] = [
            facet.create_filter(
                objects,
                saved_state.get(facet.name),
                strict=self.config.strict_projection,
            )
            for facet in self._facets
        ]
        self._by_name: Dict[str, Filter] = {f.name: f for f in self._filters}
        self._engine = FilterEngine(objects, self._filters)

        logger.info(
            f"Quickfilter initialized: {len(objects)} objects, "
            f"{len(self._facets)} facets"
        )
        self._refresh(RefreshMode.INITIAL)

    @property
    def objects(self) -> Sequence[Any]:
        return self._objects

    @property
    def facets(self) -> List[Facet]:
        return list(self._facets)

    @property
    def filters(self) -> List[Filter]:
        return list(self._filters)

    @property
    def last_result(self) -> Optional[RefreshResult]:
        return self._last_result

    def filter(self, name: str) -> Filter:
        """Get the live filter of a facet.

        Raises:
            UnknownFacetError: If no facet has that name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFacetError(name) from None

    def _categorical(self, name: str) -> CategoricalFilter:
        flt = self.filter(name)
        if not isinstance(flt, CategoricalFilter):
            raise TypeError(f"Facet {name!r} is not categorical")
        return flt

    def _free_text(self, name: str) -> FreeTextFilter:
        flt = self.filter(name)
        if not isinstance(flt, FreeTextFilter):
            raise TypeError(f"Facet {name!r} is not free text")
        return flt

    def refresh(self) -> RefreshResult:
        """Recompute matches and viable values for the current selections."""
        return self._refresh(RefreshMode.INCREMENTAL)

    def _refresh(self, mode: RefreshMode) -> RefreshResult:
        result = self._engine.refresh(mode)
        self._last_result = result

        if self._state_store is not None and self.config.persist_state:
            self._state_store.save(
                encode_state(self.get_state(), indent=self.config.state_indent)
            )

        if self._on_change is not None:
            self._on_change(result.objects, list(result.matched))

        return result

    def _changed(self, changed: bool) -> bool:
        if changed and self.config.auto_refresh:
            self.refresh()
        return changed

    def toggle(self, name: str, index: int) -> bool:
        """Toggle one value of a categorical facet, addressed by position.

        Non-viable values ignore the toggle.

        Returns:
            True if the selection changed
        """
        return self._changed(self._categorical(name).toggle(index))

    def select(self, name: str, values: Iterable[str], selected: bool = True) -> bool:
        """Select (or deselect) values of a categorical facet by name.

        Returns:
            True if the selection changed
        """
        return self._changed(self._categorical(name).select(values, selected) > 0)

    def set_query(self, name: str, text: str) -> bool:
        """Replace the query of a free-text facet.

        Returns:
            True if the query changed
        """
        return self._changed(self._free_text(name).set_query(text))

    def clear(self, name: Optional[str] = None) -> bool:
        """Return one facet, or every facet, to the pass-all state.

        Returns:
            True if any filter changed
        """
        targets = [self.filter(name)] if name is not None else self._filters
        changed = False
        for flt in targets:
            before = flt.get_save_state()
            flt.reset()
            changed = changed or flt.get_save_state() != before
        return self._changed(changed)

    def matched_objects(self) -> List[Any]:
        """Objects matched at the most recent refresh."""
        if self._last_result is None:
            return []
        return self._last_result.matched_objects()

    def get_state(self) -> Dict[str, Any]:
        """Current filter state, keyed by facet name."""
        return {f.name: f.get_save_state() for f in self._filters}


__all__ = ["ChangeCallback", "SessionConfig", "Quickfilter"]
