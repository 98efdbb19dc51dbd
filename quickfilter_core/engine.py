"""Quickfilter Filter Engine - Match Classification and Viability.

The FilterEngine evaluates every filter against every object and sorts
the objects into three classes:

- matched: no filter fails
- single-miss(F): exactly one filter F fails
- multi-miss: two or more filters fail

Each filter then derives its viable values from the matched and
single-miss objects.  Only these classes matter, so evaluation of an
object stops as soon as its second failure is seen.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from quickfilter_core.facets.base import Filter, RefreshMode

logger = logging.getLogger(__name__)

# Classification only distinguishes 0, 1 and "2 or more" failures
MISS_LIMIT = 2


@dataclass
class MatchClassification:
    """Per-object classification from one evaluation pass.

    Attributes:
        matched: True if the object satisfies every filter
        missed: The single failing filter, or None when zero or several fail
        miss_counts: Failure count per object, capped at MISS_LIMIT
    """

    matched: List[bool] = field(default_factory=list)
    missed: List[Optional[Filter]] = field(default_factory=list)
    miss_counts: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.matched)

    def matched_indices(self) -> List[int]:
        return [i for i, m in enumerate(self.matched) if m]

    def single_miss_indices(self, flt: Filter) -> List[int]:
        """Indices of objects failing only the given filter."""
        return [i for i, f in enumerate(self.missed) if f is flt]

    def multi_miss_indices(self) -> List[int]:
        return [i for i, c in enumerate(self.miss_counts) if c >= MISS_LIMIT]

    @property
    def matched_count(self) -> int:
        return sum(self.matched)


@dataclass
class RefreshResult:
    """Outcome of one refresh.

    Attributes:
        objects: The object collection, unmodified
        matched: Per-object match flags, in collection order
        classification: Full match classification
        mode: Presentation mode of this refresh
        took_ms: Time spent computing
    """

    objects: Sequence[Any]
    matched: List[bool]
    classification: MatchClassification
    mode: RefreshMode = RefreshMode.INCREMENTAL
    took_ms: float = 0.0

    @property
    def matched_count(self) -> int:
        return self.classification.matched_count

    def matched_objects(self) -> List[Any]:
        return [obj for obj, m in zip(self.objects, self.matched) if m]


class FilterEngine:
    """Recomputes matches and viable values for a set of filters.

    Args:
        objects: Object collection, fixed for the engine's lifetime
        filters: Filters, in evaluation order
    """

    def __init__(self, objects: Sequence[Any], filters: Sequence[Filter]):
        self.objects = objects
        self.filters = list(filters)

    def classify(self) -> MatchClassification:
        """Evaluate all filters against all objects.

        Returns:
            Match classification
        """
        predicates = [f.make_predicate() for f in self.filters]
        filters = self.filters

        count = len(self.objects)
        matched = [False] * count
        missed: List[Optional[Filter]] = [None] * count
        miss_counts = [0] * count

        for i in range(count):
            obj_missed = None
            nmissed = 0
            for pi, predicate in enumerate(predicates):
                if not predicate(i):
                    obj_missed = filters[pi]
                    nmissed += 1
                    if nmissed >= MISS_LIMIT:
                        break

            matched[i] = nmissed == 0
            miss_counts[i] = nmissed
            if nmissed == 1:
                missed[i] = obj_missed

        return MatchClassification(
            matched=matched,
            missed=missed,
            miss_counts=miss_counts,
        )

    def refresh(self, mode: RefreshMode = RefreshMode.INCREMENTAL) -> RefreshResult:
        """Classify objects and refresh every filter's display state.

        Args:
            mode: Presentation mode handed to the filters

        Returns:
            Refresh result
        """
        start = time.perf_counter()

        classification = self.classify()
        for flt in self.filters:
            flt.refresh(classification.matched, classification.missed, mode)

        took_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            f"Refresh ({mode.value}): {classification.matched_count}/"
            f"{len(classification)} objects matched in {took_ms:.2f}ms"
        )

        return RefreshResult(
            objects=self.objects,
            matched=list(classification.matched),
            classification=classification,
            mode=mode,
            took_ms=took_ms,
        )


__all__ = [
    "MISS_LIMIT",
    "MatchClassification",
    "RefreshResult",
    "FilterEngine",
]
