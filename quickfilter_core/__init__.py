"""Quickfilter - Lean Faceted Filtering for a Fixed Object Collection.

Filters a fixed collection of objects through independently configured
facets and, on every change, recomputes both the matched objects and,
for each facet, the values that would still leave a non-empty result
if selected.

Architecture:
┌─────────────────────────────────────────────────────────────────────┐
│                        Quickfilter Session                          │
│        restores state → refreshes → saves state → on_change         │
├─────────────────────────────────────────────────────────────────────┤
│                          Filter Engine                              │
│   predicates → matched / single-miss(F) / multi-miss → refresh(F)   │
├─────────────────────────────────────────────────────────────────────┤
│   ┌──────────────────────────┐      ┌──────────────────────────┐    │
│   │    Categorical Filter    │      │     Free-Text Filter     │    │
│   │  value records, viable   │      │  lazy index, probes      │    │
│   └──────────────────────────┘      └────────────┬─────────────┘    │
│                                                  │                  │
│                                   ┌──────────────┴─────────────┐    │
│                                   │  Analyzer: lowercase →     │    │
│                                   │  accent fold → words →     │    │
│                                   │  dedupe                    │    │
│                                   └────────────────────────────┘    │
└─────────────────────────────────────────────────────────────────────┘

Rendering is left to the caller: the session reports per-object match
flags, and each categorical filter exposes per-value selection,
viability and check-mark shading.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Session
from quickfilter_core.session import (
    Quickfilter,
    SessionConfig,
)

# Engine
from quickfilter_core.engine import (
    FilterEngine,
    MatchClassification,
    RefreshResult,
)

# Facets
from quickfilter_core.facets import (
    Categorical,
    CategoricalFilter,
    CheckState,
    Compute,
    Facet,
    FacetValue,
    Filter,
    FreeText,
    FreeTextFilter,
    NamedAttribute,
    RefreshMode,
)

# Analyzers
from quickfilter_core.analyzers import (
    FreeTextAnalyzer,
    ParsedText,
    fold,
    tokenize,
)

# Storage
from quickfilter_core.storage import (
    FileStateStore,
    MemoryStateStore,
    StateStore,
    StorageConfig,
)

# Errors
from quickfilter_core.errors import (
    DuplicateFacetError,
    FacetConfigurationError,
    ProjectionError,
    QuickfilterError,
    UnknownFacetError,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Session
    "Quickfilter",
    "SessionConfig",
    # Engine
    "FilterEngine",
    "MatchClassification",
    "RefreshResult",
    # Facets
    "Categorical",
    "CategoricalFilter",
    "CheckState",
    "Compute",
    "Facet",
    "FacetValue",
    "Filter",
    "FreeText",
    "FreeTextFilter",
    "NamedAttribute",
    "RefreshMode",
    # Analyzers
    "FreeTextAnalyzer",
    "ParsedText",
    "fold",
    "tokenize",
    # Storage
    "FileStateStore",
    "MemoryStateStore",
    "StateStore",
    "StorageConfig",
    # Errors
    "DuplicateFacetError",
    "FacetConfigurationError",
    "ProjectionError",
    "QuickfilterError",
    "UnknownFacetError",
]
