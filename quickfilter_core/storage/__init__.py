"""Quickfilter Storage Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from quickfilter_core.storage.backend import StateStore, StorageConfig
from quickfilter_core.storage.memory import MemoryStateStore
from quickfilter_core.storage.file import FileStateStore
from quickfilter_core.storage.codec import encode_state, decode_state

__all__ = [
    "StateStore",
    "StorageConfig",
    "MemoryStateStore",
    "FileStateStore",
    "encode_state",
    "decode_state",
]
