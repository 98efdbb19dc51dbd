"""Quickfilter Analyzers - Free-Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from quickfilter_core.analyzers.base import (
    Analyzer,
    CharacterFilter,
    Token,
    TokenFilter,
    TokenStream,
    Tokenizer,
)
from quickfilter_core.analyzers.folding import (
    AccentFoldingCharFilter,
    LowercaseCharFilter,
    fold,
)
from quickfilter_core.analyzers.filters import UniqueFilter
from quickfilter_core.analyzers.tokenizers import (
    PatternTokenizer,
    WordTokenizer,
)
from quickfilter_core.analyzers.standard import (
    FreeTextAnalyzer,
    ParsedText,
    tokenize,
)

__all__ = [
    "Analyzer",
    "CharacterFilter",
    "Token",
    "TokenFilter",
    "TokenStream",
    "Tokenizer",
    "AccentFoldingCharFilter",
    "LowercaseCharFilter",
    "fold",
    "UniqueFilter",
    "PatternTokenizer",
    "WordTokenizer",
    "FreeTextAnalyzer",
    "ParsedText",
    "tokenize",
]
