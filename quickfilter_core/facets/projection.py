"""Quickfilter Projections - Reading Facet Values From Objects.

A projection turns one object of the collection into the list of
string values it holds for a facet.  Facets accept either a
``NamedAttribute`` (or a bare attribute/key name) or a ``Compute``
(or a bare callable); both are resolved once, when the facet is
created.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Union

from quickfilter_core.errors import FacetConfigurationError, ProjectionError


@dataclass(frozen=True)
class NamedAttribute:
    """Reads a named key (mappings) or attribute (everything else).

    A missing key or attribute means the object holds no value.
    """

    key: str

    def __call__(self, obj: Any) -> Any:
        if isinstance(obj, Mapping):
            return obj.get(self.key)
        return getattr(obj, self.key, None)


@dataclass(frozen=True)
class Compute:
    """Calls an arbitrary function on each object."""

    fn: Callable[[Any], Any]

    def __call__(self, obj: Any) -> Any:
        return self.fn(obj)


Projection = Union[NamedAttribute, Compute]
ProjectionSpec = Union[str, NamedAttribute, Compute, Callable[[Any], Any]]


def resolve_projection(spec: ProjectionSpec) -> Projection:
    """Resolve a projection shorthand into a projection.

    Args:
        spec: Attribute name, callable, or an explicit projection

    Returns:
        Resolved projection

    Raises:
        FacetConfigurationError: If spec is none of the accepted forms
    """
    if isinstance(spec, (NamedAttribute, Compute)):
        return spec
    if isinstance(spec, str):
        return NamedAttribute(spec)
    if callable(spec):
        return Compute(spec)
    raise FacetConfigurationError(
        f"Projection must be an attribute name or a callable, got {type(spec).__name__}"
    )


def normalize_values(
    raw: Any,
    facet_name: str,
    object_index: int,
    strict: bool = True,
) -> List[str]:
    """Normalize a raw projection result into a list of strings.

    A single string becomes a one-element list and None becomes an
    empty list; other iterables are listed item by item.

    Args:
        raw: Value returned by the projection
        facet_name: Facet name, for error reporting
        object_index: Object index, for error reporting
        strict: Reject non-string items instead of converting them

    Returns:
        Projected values

    Raises:
        ProjectionError: If an item is not a string and strict is set
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, (bytes, Mapping)) or not hasattr(raw, "__iter__"):
        items: Sequence[Any] = [raw]
    else:
        items = list(raw)

    values = []
    for item in items:
        if isinstance(item, str):
            values.append(item)
        elif strict or item is None or isinstance(item, (bytes, Mapping)):
            raise ProjectionError(facet_name, object_index, item)
        else:
            values.append(str(item))
    return values


def project_all(
    projection: Projection,
    objects: Sequence[Any],
    facet_name: str,
    strict: bool = True,
) -> List[List[str]]:
    """Project every object in the collection.

    Args:
        projection: Resolved projection
        objects: Object collection
        facet_name: Facet name, for error reporting
        strict: Reject non-string values instead of converting them

    Returns:
        One value list per object, in collection order
    """
    return [
        normalize_values(projection(obj), facet_name, i, strict)
        for i, obj in enumerate(objects)
    ]


__all__ = [
    "NamedAttribute",
    "Compute",
    "Projection",
    "ProjectionSpec",
    "resolve_projection",
    "normalize_values",
    "project_all",
]
