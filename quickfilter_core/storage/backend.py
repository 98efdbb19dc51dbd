"""Quickfilter State Store - Abstract Saved-State Interface.

A state store holds one serialized string: the filter state of a
session.  It stands in for whatever the host keeps page state in.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

@dataclass
class StorageConfig:
    """Storage configuration."""
    path: str = ""
    encoding: str = "utf-8"

class StateStore(ABC):
    """Abstract saved-state store."""

    def __init__(self, config: StorageConfig = None):
        self.config = config or StorageConfig()

    @abstractmethod
    def load(self) -> Optional[str]:
        """Return the saved state, or None if nothing usable is stored."""
        pass

    @abstractmethod
    def save(self, state: str) -> None:
        pass

    def clear(self) -> None:
        pass

__all__ = ["StateStore", "StorageConfig"]
