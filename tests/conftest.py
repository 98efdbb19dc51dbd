"""
Test Configuration - Shared fixtures for quickfilter tests.
"""

from typing import Any, Dict, List

import pytest

from quickfilter_core import Categorical, FreeText, MemoryStateStore


@pytest.fixture
def products() -> List[Dict[str, Any]]:
    """A small catalogue with single- and multi-valued facets."""
    return [
        {"title": "Red cotton shirt", "color": "red", "size": ["S", "M"], "brand": "Acme"},
        {"title": "Blue denim jacket", "color": "blue", "size": ["M", "L"], "brand": "Acme"},
        {"title": "Red wool scarf", "color": "red", "size": "L", "brand": "Béla"},
        {"title": "Green café apron", "color": "green", "size": ["S"], "brand": "Béla"},
        {"title": "Blue cotton T-shirt", "color": "blue", "size": ["S", "L"], "brand": "Zed"},
    ]


@pytest.fixture
def product_facets() -> List[Any]:
    return [
        Categorical("Color", "color"),
        Categorical("Size", "size"),
        Categorical("Brand", "brand"),
        FreeText("Search", "title"),
    ]


@pytest.fixture
def scenario_objects() -> List[Dict[str, str]]:
    """Four objects; with A={a1,a2} and B={b1,b3} only object 1 matches.

    Object 2 misses only B, object 3 misses only A, object 4 misses both.
    """
    return [
        {"a": "a1", "b": "b1", "c": "c1"},
        {"a": "a2", "b": "b2", "c": "c2"},
        {"a": "a3", "b": "b3", "c": "c3"},
        {"a": "a4", "b": "b4", "c": "c4"},
    ]


@pytest.fixture
def scenario_facets() -> List[Categorical]:
    return [
        Categorical("A", "a", initial=["a1", "a2"]),
        Categorical("B", "b", initial=["b1", "b3"]),
        Categorical("C", "c"),
    ]


@pytest.fixture
def store() -> MemoryStateStore:
    return MemoryStateStore()


class ChangeRecorder:
    """Collects on_change calls."""

    def __init__(self):
        self.calls: List[Any] = []

    def __call__(self, objects, matched):
        self.calls.append((objects, matched))

    @property
    def last_matched(self) -> List[bool]:
        return self.calls[-1][1]


@pytest.fixture
def recorder() -> ChangeRecorder:
    return ChangeRecorder()
