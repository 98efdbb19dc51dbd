"""Quickfilter Analyzer Base - Free-Text Analysis Pipeline.

Text flows through three stages:

    raw text → character filters → tokenizer → token filters

Character filters see the whole string (lowercasing, accent folding),
the tokenizer cuts it into offset-tagged tokens, and token filters
rewrite the token sequence.  Offsets and lengths refer to the
character-filtered text.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence


@dataclass
class Token:
    """One word cut from filtered text.

    Attributes:
        text: Token text
        position: Ordinal among the stream's tokens
        start_offset: Start character offset in the filtered text
        end_offset: End character offset in the filtered text
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position})"

    def renumbered(self, position: int) -> "Token":
        """Copy of this token at another position."""
        return replace(self, position=position)


class TokenStream:
    """Tokens cut from one text, plus the length of that text.

    The length lets the parser tell whether the final token runs up to
    the end of the input, i.e. whether the user may still be typing it.
    """

    def __init__(self, tokens: Optional[Sequence[Token]] = None, text_length: int = 0):
        self._tokens: List[Token] = list(tokens or ())
        self.text_length = text_length

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def last(self) -> Optional[Token]:
        return self._tokens[-1] if self._tokens else None

    @property
    def trailing(self) -> Optional[Token]:
        """Final token if nothing follows it in the text, else None."""
        last = self.last()
        if last is not None and last.end_offset == self.text_length:
            return last
        return None

    def get_texts(self) -> List[str]:
        return [t.text for t in self._tokens]


class CharacterFilter(ABC):
    """Rewrites text before tokenization."""

    @abstractmethod
    def filter(self, text: str) -> str:
        pass


class Tokenizer(ABC):
    """Cuts filtered text into tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text.

        Args:
            text: Character-filtered text

        Returns:
            Token stream with text_length set to len(text)
        """
        pass


class TokenFilter(ABC):
    """Rewrites a token stream; must not mutate its input tokens."""

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        pass


class Analyzer:
    """Runs text through character filters, a tokenizer and token filters.

    Args:
        tokenizer: Tokenizer to use
        char_filters: Character filters, applied in order
        token_filters: Token filters, applied in order
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        char_filters: Optional[List[CharacterFilter]] = None,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        self._tokenizer = tokenizer
        self._char_filters = char_filters or []
        self._token_filters = token_filters or []

    def normalize(self, text: str) -> str:
        """Run only the character filters over text."""
        for char_filter in self._char_filters:
            text = char_filter.filter(text)
        return text

    def tokenize(self, text: str) -> TokenStream:
        """Normalize and tokenize text, without token filtering."""
        return self._tokenizer.tokenize(self.normalize(text))

    def filter_tokens(self, stream: TokenStream) -> TokenStream:
        """Run the token filters over a stream."""
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream

    def analyze(self, text: str) -> TokenStream:
        """Run the full pipeline over text."""
        return self.filter_tokens(self.tokenize(text))


__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "CharacterFilter",
]
