"""
Module: text.tokenizer

Purpose:
    Lexical foundation for similarity scoring and keyword analysis:
    lowercase alphanumeric tokens with stop words removed, and
    term-frequency counts.

Key Functions:
    - tokenize(): Text -> list of content tokens
    - term_frequency(): Tokens -> Counter (first-seen order preserved)

Dependencies:
    - re, collections (std)
    - grading_toolkit.text.config: TokenizerConfig

Used By:
    - text.similarity, text.keywords
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List

from .config import DEFAULT_TOKENIZER_CONFIG, TokenizerConfig

# Anything that is not an ASCII letter, digit or whitespace separates tokens
_NON_TOKEN_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str, config: TokenizerConfig = DEFAULT_TOKENIZER_CONFIG) -> List[str]:
    """
    Split text into lowercase content tokens.

    Punctuation and non-ASCII characters become separators, so
    "cell-wall" yields ["cell", "wall"].

    Args:
        text: Raw text (may be empty)
        config: Stop words and minimum token length

    Returns:
        Tokens in text order, duplicates kept

    Example:
        >>> tokenize("The Mitochondria is the powerhouse!")
        ['mitochondria', 'powerhouse']
    """
    if not text:
        return []
    cleaned = _NON_TOKEN_RE.sub(" ", text.lower())
    return [
        token
        for token in _WHITESPACE_RE.split(cleaned)
        if len(token) >= config.min_token_length and token not in config.stop_words
    ]


def term_frequency(tokens: Iterable[str]) -> Counter:
    """Count tokens. Iteration order is first occurrence."""
    return Counter(tokens)
