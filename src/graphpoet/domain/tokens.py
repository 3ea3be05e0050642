"""Tokenizer — whitespace tokens with a normalized graph key.

Corpus and poem input go through the same functions so that graph keys
are consistent between the build and generation phases.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Leading/trailing characters that are neither word characters nor apostrophes.
_EDGE_PUNCT = re.compile(r"^[^\w']+|[^\w']+$")


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited token.

    Attributes:
        text: The token as written (original casing and punctuation).
        key: Normalized form used as a graph vertex.
    """

    text: str
    key: str


def normalize_word(text: str, *, strip_punctuation: bool = True) -> str:
    """Case-fold *text* and optionally strip surrounding punctuation.

    Examples:
        >>> normalize_word("System.")
        'system'
        >>> normalize_word("Hello,", strip_punctuation=False)
        'hello,'
        >>> normalize_word("don't")
        "don't"
    """
    if strip_punctuation:
        text = _EDGE_PUNCT.sub("", text)
    return text.casefold()


def tokenize(text: str, *, strip_punctuation: bool = True) -> list[Token]:
    """Split *text* on whitespace, dropping tokens with an empty key."""
    tokens: list[Token] = []
    for raw in text.split():
        key = normalize_word(raw, strip_punctuation=strip_punctuation)
        if key:
            tokens.append(Token(text=raw, key=key))
    return tokens


def render_poem(words: Iterable[str]) -> str:
    """Join output words with single spaces."""
    return " ".join(words)
