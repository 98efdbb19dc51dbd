"""Quickfilter Standard Analyzer - Free-Text Query and Document Parsing.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from quickfilter_core.analyzers.base import Analyzer
from quickfilter_core.analyzers.filters import UniqueFilter
from quickfilter_core.analyzers.folding import (
    AccentFoldingCharFilter,
    LowercaseCharFilter,
)
from quickfilter_core.analyzers.tokenizers import WordTokenizer


@dataclass
class ParsedText:
    """Result of parsing free text.

    Attributes:
        tokens: Distinct tokens in first-occurrence order
        prefix: Final token when it runs to the end of the text (the
            user may still be typing it), otherwise None
    """

    tokens: List[str] = field(default_factory=list)
    prefix: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.tokens


class FreeTextAnalyzer(Analyzer):
    """Lowercases, accent-folds, splits into words and deduplicates."""

    def __init__(self):
        super().__init__(
            tokenizer=WordTokenizer(),
            char_filters=[
                LowercaseCharFilter(),
                AccentFoldingCharFilter(),
            ],
            token_filters=[
                UniqueFilter(),
            ],
        )

    def parse(self, text: str) -> ParsedText:
        """Parse text into distinct tokens and an in-progress prefix.

        Args:
            text: Query or document text

        Returns:
            Parsed tokens
        """
        raw = self.tokenize(text)

        # Decided before deduplication, which may drop the final token
        trailing = raw.trailing
        prefix = trailing.text if trailing is not None else None

        return ParsedText(tokens=self.filter_tokens(raw).get_texts(), prefix=prefix)


_default_analyzer = FreeTextAnalyzer()


def tokenize(text: str) -> ParsedText:
    """Parse text with the default free-text analyzer."""
    return _default_analyzer.parse(text)


__all__ = [
    "FreeTextAnalyzer",
    "ParsedText",
    "tokenize",
]
