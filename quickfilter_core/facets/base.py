"""Quickfilter Facet Base - Facet and Filter Interfaces.

A ``Facet`` is configuration: a name, a projection and an initial
selection.  Calling ``create_filter`` binds it to an object collection
and yields a ``Filter``, which holds the live selection state.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from quickfilter_core.errors import FacetConfigurationError
from quickfilter_core.facets.projection import ProjectionSpec, resolve_projection

Predicate = Callable[[int], bool]


def match_all(index: int) -> bool:
    """Predicate of a filter in the pass-all state."""
    return True


class RefreshMode(Enum):
    """How a refresh should be presented.

    INITIAL is the first refresh after construction, which the renderer
    shows without transitions.  Every later refresh is INCREMENTAL.
    """

    INITIAL = "initial"
    INCREMENTAL = "incremental"


class Filter(ABC):
    """Live, mutable selection state for one facet."""

    def __init__(self, facet: "Facet", objects: Sequence[Any]):
        self.facet = facet
        self._objects = objects

    @property
    def name(self) -> str:
        return self.facet.name

    @abstractmethod
    def is_pass_all(self) -> bool:
        """Return True if the filter currently matches every object."""
        pass

    @abstractmethod
    def make_predicate(self) -> Predicate:
        """Return a predicate over object indexes for the current selection."""
        pass

    @abstractmethod
    def refresh(
        self,
        matched: List[bool],
        missed: List[Optional["Filter"]],
        mode: RefreshMode = RefreshMode.INCREMENTAL,
    ) -> None:
        """Update derived display state after a recomputation.

        Args:
            matched: Per-object flag, True if all filters match
            missed: Per-object filter that alone failed to match it, or
                None when zero or several filters failed
            mode: Refresh presentation mode
        """
        pass

    @abstractmethod
    def get_save_state(self) -> Any:
        """Return the JSON-serializable state to persist."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Return to the pass-all state."""
        pass


class Facet(ABC):
    """Facet configuration.

    Args:
        name: Unique facet name; joins saved state to the live filter
        proj: Attribute name, callable, or explicit projection
        initial: Variant-specific initial selection
    """

    def __init__(self, name: str, proj: ProjectionSpec, initial: Any = None):
        if not isinstance(name, str) or not name:
            raise FacetConfigurationError(f"Facet name must be a non-empty string, got {name!r}")
        self.name = name
        self.projection = resolve_projection(proj)
        self.initial = initial

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @abstractmethod
    def create_filter(
        self,
        objects: Sequence[Any],
        saved_state: Any = None,
        strict: bool = True,
    ) -> Filter:
        """Create the live filter for this facet.

        Args:
            objects: Object collection, fixed for the filter's lifetime
            saved_state: Previously saved state for this facet, if any;
                anything unusable is ignored
            strict: Reject non-string projected values

        Returns:
            New filter
        """
        pass


__all__ = [
    "Predicate",
    "match_all",
    "RefreshMode",
    "Filter",
    "Facet",
]
