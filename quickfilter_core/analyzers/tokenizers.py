"""Quickfilter Tokenizers - Text Tokenization Strategies.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import Union

from quickfilter_core.analyzers.base import (
    Tokenizer,
    Token,
    TokenStream,
)


class PatternTokenizer(Tokenizer):
    """Pattern-based tokenizer.

    Every non-overlapping match of the pattern, scanning left to right,
    becomes one token.
    """

    def __init__(self, pattern: Union[str, re.Pattern]):
        """Initialize tokenizer.

        Args:
            pattern: Regex pattern matching a single token
        """
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text using pattern."""
        tokens = []

        for position, match in enumerate(self.pattern.finditer(text)):
            tokens.append(Token(
                text=match.group(0),
                position=position,
                start_offset=match.start(),
                end_offset=match.end(),
            ))

        return TokenStream(tokens, text_length=len(text))


class WordTokenizer(PatternTokenizer):
    """Word tokenizer.

    Produces maximal runs of word characters (Unicode letters, digits
    and underscore).  Punctuation and whitespace only separate tokens.
    """

    WORD_PATTERN = re.compile(r"\w+")

    def __init__(self):
        super().__init__(self.WORD_PATTERN)


__all__ = [
    "Tokenizer",
    "PatternTokenizer",
    "WordTokenizer",
]
