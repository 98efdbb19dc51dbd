"""Tests for facet projections."""

from types import SimpleNamespace

import pytest

from quickfilter_core.errors import FacetConfigurationError, ProjectionError
from quickfilter_core.facets.projection import (
    Compute,
    NamedAttribute,
    normalize_values,
    project_all,
    resolve_projection,
)


class TestResolveProjection:
    def test_string_is_named_attribute(self):
        assert resolve_projection("color") == NamedAttribute("color")

    def test_callable_is_compute(self):
        fn = lambda obj: obj["color"]
        projection = resolve_projection(fn)
        assert isinstance(projection, Compute)
        assert projection({"color": "red"}) == "red"

    def test_explicit_projection_is_kept(self):
        projection = NamedAttribute("size")
        assert resolve_projection(projection) is projection

    def test_invalid_spec_raises(self):
        with pytest.raises(FacetConfigurationError):
            resolve_projection(42)


class TestNamedAttribute:
    def test_reads_mapping_key(self):
        assert NamedAttribute("color")({"color": "red"}) == "red"

    def test_reads_object_attribute(self):
        assert NamedAttribute("color")(SimpleNamespace(color="blue")) == "blue"

    def test_missing_is_none(self):
        assert NamedAttribute("color")({}) is None
        assert NamedAttribute("color")(SimpleNamespace()) is None


class TestNormalizeValues:
    def test_single_string_becomes_list(self):
        assert normalize_values("red", "Color", 0) == ["red"]

    def test_none_is_empty(self):
        assert normalize_values(None, "Color", 0) == []

    def test_sequences_are_listed(self):
        assert normalize_values(("S", "M"), "Size", 0) == ["S", "M"]
        assert normalize_values(iter(["L"]), "Size", 0) == ["L"]

    def test_strict_rejects_non_strings(self):
        with pytest.raises(ProjectionError) as excinfo:
            normalize_values(["S", 3], "Size", 7)
        assert excinfo.value.facet_name == "Size"
        assert excinfo.value.object_index == 7
        assert excinfo.value.value == 3

    def test_strict_rejects_scalars(self):
        with pytest.raises(ProjectionError):
            normalize_values(2013, "Year", 0)

    def test_lenient_converts_scalars(self):
        assert normalize_values(2013, "Year", 0, strict=False) == ["2013"]
        assert normalize_values([1, "2"], "Year", 0, strict=False) == ["1", "2"]

    def test_lenient_still_rejects_none_items(self):
        with pytest.raises(ProjectionError):
            normalize_values(["a", None], "Tags", 0, strict=False)

    def test_projection_error_is_configuration_error(self):
        with pytest.raises(FacetConfigurationError):
            normalize_values(b"raw", "Tags", 0)


class TestProjectAll:
    def test_projects_in_collection_order(self):
        objects = [{"tags": ["a", "b"]}, {"tags": "c"}, {}]
        assert project_all(NamedAttribute("tags"), objects, "Tags") == [["a", "b"], ["c"], []]
