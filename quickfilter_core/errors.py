"""Quickfilter Errors.

Only configuration mistakes raise.  Problems restoring saved state are
logged and the affected filter falls back to its defaults.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations


class QuickfilterError(Exception):
    """Base class for all quickfilter errors."""
    pass


class FacetConfigurationError(QuickfilterError, ValueError):
    """Raised when facets are configured incorrectly."""
    pass


class DuplicateFacetError(FacetConfigurationError):
    """Raised when two facets share a name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate facet name: {name!r}")
        self.name = name


class ProjectionError(FacetConfigurationError):
    """Raised when a projection yields something other than strings."""

    def __init__(self, facet_name: str, object_index: int, value: object):
        super().__init__(
            f"Facet {facet_name!r} projected {type(value).__name__} value "
            f"{value!r} for object {object_index}; expected str"
        )
        self.facet_name = facet_name
        self.object_index = object_index
        self.value = value


class UnknownFacetError(QuickfilterError, KeyError):
    """Raised when looking up a facet name that was never configured."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown facet: {self.name!r}"


__all__ = [
    "QuickfilterError",
    "FacetConfigurationError",
    "DuplicateFacetError",
    "ProjectionError",
    "UnknownFacetError",
]
