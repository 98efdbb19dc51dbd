"""Quickfilter File Store - File-Based State Store.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
import os
from typing import Optional
from quickfilter_core.storage.backend import StateStore, StorageConfig

logger = logging.getLogger(__name__)

class FileStateStore(StateStore):
    """State store backed by a single file.

    Read failures count as "nothing saved"; write failures are logged
    and dropped so a refresh never fails on persistence.
    """

    def __init__(self, config: StorageConfig = None):
        super().__init__(config)
        if not self.config.path:
            raise ValueError("FileStateStore requires StorageConfig.path")
        directory = os.path.dirname(self.config.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def load(self) -> Optional[str]:
        try:
            with open(self.config.path, "r", encoding=self.config.encoding) as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read saved state from {self.config.path}: {e}")
            return None

    def save(self, state: str) -> None:
        try:
            with open(self.config.path, "w", encoding=self.config.encoding) as f:
                f.write(state)
        except OSError as e:
            logger.warning(f"Failed to save filter state to {self.config.path}: {e}")

    def clear(self) -> None:
        if os.path.exists(self.config.path):
            os.remove(self.config.path)

__all__ = ["FileStateStore"]
