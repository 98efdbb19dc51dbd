"""Quickfilter Memory Store - In-Memory State Store.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Optional
from quickfilter_core.storage.backend import StateStore, StorageConfig

class MemoryStateStore(StateStore):
    """In-memory state store, like a hidden form field."""

    def __init__(self, initial: Optional[str] = None, config: StorageConfig = None):
        super().__init__(config)
        self._data: Optional[str] = initial

    def load(self) -> Optional[str]:
        return self._data

    def save(self, state: str) -> None:
        self._data = state

    def clear(self) -> None:
        self._data = None

__all__ = ["MemoryStateStore"]
