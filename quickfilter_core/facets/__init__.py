"""Quickfilter Facet Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from quickfilter_core.facets.base import (
    Facet,
    Filter,
    Predicate,
    RefreshMode,
    match_all,
)
from quickfilter_core.facets.builder import (
    FacetValue,
    ValueSetBuilder,
)
from quickfilter_core.facets.categorical import (
    Categorical,
    CategoricalFilter,
    CheckState,
)
from quickfilter_core.facets.freetext import (
    FreeText,
    FreeTextFilter,
)
from quickfilter_core.facets.projection import (
    Compute,
    NamedAttribute,
    resolve_projection,
)

__all__ = [
    "Facet",
    "Filter",
    "Predicate",
    "RefreshMode",
    "match_all",
    "FacetValue",
    "ValueSetBuilder",
    "Categorical",
    "CategoricalFilter",
    "CheckState",
    "FreeText",
    "FreeTextFilter",
    "Compute",
    "NamedAttribute",
    "resolve_projection",
]
