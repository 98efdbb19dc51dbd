"""Quickfilter Token Filters - Token Transformation Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List, Set

from quickfilter_core.analyzers.base import (
    TokenFilter,
    Token,
    TokenStream,
)


class UniqueFilter(TokenFilter):
    """Removes repeated tokens, keeping the first occurrence.

    Surviving tokens are renumbered so positions stay contiguous.
    """

    def filter(self, stream: TokenStream) -> TokenStream:
        """Drop tokens whose text has already been seen."""
        seen: Set[str] = set()
        tokens: List[Token] = []
        for token in stream:
            if token.text in seen:
                continue
            seen.add(token.text)
            tokens.append(token.renumbered(len(tokens)))
        return TokenStream(tokens, text_length=stream.text_length)


__all__ = [
    "TokenFilter",
    "UniqueFilter",
]
