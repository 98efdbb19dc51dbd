"""Quickfilter Free-Text Facet - Incremental Word Search.

Each object's projected text is reduced to its distinct folded tokens
and stored as an index string, e.g. ``"red cotton shirt "``.  A query
matches an object when every query token occurs somewhere in that
string: followed by the delimiter for completed words, bare for the
word still being typed at the end of the query.  Matching is plain
substring search, so ``"shirt "`` also finds ``"tshirt "``.

The index is built on the first non-empty query and kept for the life
of the filter.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Optional, Sequence

from quickfilter_core.analyzers.standard import FreeTextAnalyzer, ParsedText
from quickfilter_core.errors import FacetConfigurationError
from quickfilter_core.facets.base import (
    Facet,
    Filter,
    Predicate,
    RefreshMode,
    match_all,
)
from quickfilter_core.facets.projection import ProjectionSpec, normalize_values

logger = logging.getLogger(__name__)


class FreeText(Facet):
    """Facet searched by a free-text query.

    Args:
        name: Unique facet name
        proj: Attribute name or callable returning the searchable text
            (a list of strings is searched as if joined by spaces)
        initial: Query used when no saved state overrides it
        analyzer: Analyzer for both queries and object text
    """

    def __init__(
        self,
        name: str,
        proj: ProjectionSpec,
        initial: Optional[str] = None,
        analyzer: Optional[FreeTextAnalyzer] = None,
    ):
        if initial is not None and not isinstance(initial, str):
            raise FacetConfigurationError(
                f"Initial query of facet {name!r} must be a string, got {type(initial).__name__}"
            )
        super().__init__(name, proj, initial or "")
        self.analyzer = analyzer or FreeTextAnalyzer()

    def create_filter(
        self,
        objects: Sequence[Any],
        saved_state: Any = None,
        strict: bool = True,
    ) -> "FreeTextFilter":
        return FreeTextFilter(self, objects, saved_state, strict)


class FreeTextFilter(Filter):
    """Live query state of a free-text facet."""

    DELIMITER = " "

    def __init__(
        self,
        facet: FreeText,
        objects: Sequence[Any],
        saved_state: Any = None,
        strict: bool = True,
    ):
        super().__init__(facet, objects)
        self._analyzer = facet.analyzer
        self._strict = strict
        self._index: Optional[List[str]] = None

        if isinstance(saved_state, str):
            # An empty saved query means "unset", not "cleared"
            self._query = saved_state or facet.initial
        else:
            if saved_state is not None:
                logger.debug(
                    f"Ignoring saved state for facet {facet.name!r}: "
                    f"expected a string, got {type(saved_state).__name__}"
                )
            self._query = facet.initial

    @property
    def query(self) -> str:
        return self._query

    def set_query(self, text: str) -> bool:
        """Replace the query.

        Returns:
            True if the query changed
        """
        if not isinstance(text, str):
            raise TypeError(f"Query must be a string, got {type(text).__name__}")
        if text == self._query:
            return False
        self._query = text
        return True

    def parsed(self) -> ParsedText:
        """Parse the current query."""
        return self._analyzer.parse(self._query)

    def is_pass_all(self) -> bool:
        return self.parsed().is_empty

    @property
    def index_built(self) -> bool:
        return self._index is not None

    def _ensure_index(self) -> List[str]:
        if self._index is None:
            start = time.perf_counter()
            index = []
            for i, obj in enumerate(self._objects):
                values = normalize_values(
                    self.facet.projection(obj), self.name, i, self._strict
                )
                tokens = self._analyzer.parse(" ".join(values)).tokens
                index.append(self.DELIMITER.join(tokens) + self.DELIMITER)
            self._index = index
            logger.debug(
                f"Indexed {len(index)} objects for facet {self.name!r} in "
                f"{(time.perf_counter() - start) * 1000:.2f}ms"
            )
        return self._index

    def index_string(self, index: int) -> str:
        """Get an object's index string, building the index if needed."""
        return self._ensure_index()[index]

    def make_predicate(self) -> Predicate:
        query = self.parsed()
        if query.is_empty:
            return match_all

        index = self._ensure_index()

        # The in-progress final word carries no trailing delimiter
        probes = []
        for token in query.tokens:
            if token == query.prefix:
                probes.append(token)
            else:
                probes.append(token + self.DELIMITER)

        def predicate(obj_index: int) -> bool:
            entry = index[obj_index]
            for probe in probes:
                if probe not in entry:
                    return False
            return True

        return predicate

    def refresh(
        self,
        matched: List[bool],
        missed: List[Optional[Filter]],
        mode: RefreshMode = RefreshMode.INCREMENTAL,
    ) -> None:
        # Free text has no per-value viability
        pass

    def reset(self) -> None:
        self._query = ""

    def get_save_state(self) -> str:
        return self._query


__all__ = ["FreeText", "FreeTextFilter"]
