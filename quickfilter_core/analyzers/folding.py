"""Quickfilter Accent Folding - Case/Accent-Insensitive Canonicalization.

Maps combining marks to nothing and accented lowercase Latin letters to
their bare ASCII letter, so "café", "cafe" and "café" all compare
equal once folded.  The mapping comes from the static table in
``_foldtable``; it is decoded once at import time.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from quickfilter_core.analyzers._foldtable import FOLD_TABLE
from quickfilter_core.analyzers.base import CharacterFilter

logger = logging.getLogger(__name__)


def _expand_codes(codes: Sequence[int]) -> Iterator[int]:
    """Expand one run-length encoded code point list.

    Args:
        codes: First code point followed by deltas and run markers

    Yields:
        Absolute code points
    """
    if not codes:
        return
    current = codes[0]
    yield current
    delta = 0
    for entry in codes[1:]:
        if entry >= 0:
            delta = entry
            current += delta
            yield current
        else:
            # The explicit delta already counted as the first of the run
            for _ in range(-entry - 1):
                current += delta
                yield current


def decode_table(table: Iterable[Tuple[str, Sequence[int]]]) -> Dict[int, str]:
    """Decode a folding table into a ``str.translate`` mapping.

    Args:
        table: Sequence of (replacement, encoded code points)

    Returns:
        Mapping of code point to replacement string
    """
    mapping: Dict[int, str] = {}
    for replacement, codes in table:
        for code in _expand_codes(codes):
            mapping[code] = replacement
    return mapping


_FOLD_MAP = decode_table(FOLD_TABLE)
logger.debug(f"Loaded accent folding table with {len(_FOLD_MAP)} entries")


def fold(text: str) -> str:
    """Accent-fold text.

    Combining marks are removed and lowercase letters that decompose to
    a single ASCII letter are replaced by it.  Everything else, including
    uppercase letters, passes through unchanged.

    Args:
        text: Input text

    Returns:
        Folded text
    """
    return text.translate(_FOLD_MAP)


def fold_map() -> Dict[int, str]:
    """Return a copy of the decoded folding map."""
    return dict(_FOLD_MAP)


class AccentFoldingCharFilter(CharacterFilter):
    """Character filter that accent-folds text before tokenization."""

    def filter(self, text: str) -> str:
        return fold(text)


class LowercaseCharFilter(CharacterFilter):
    """Character filter that lowercases text.

    Runs ahead of folding, since the folding table only covers
    lowercase letters.
    """

    def filter(self, text: str) -> str:
        return text.lower()


__all__ = [
    "fold",
    "fold_map",
    "decode_table",
    "AccentFoldingCharFilter",
    "LowercaseCharFilter",
]
