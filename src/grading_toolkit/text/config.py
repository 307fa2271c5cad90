"""
Module: text.config

Purpose:
    Immutable tokenizer configuration. The stop-word set is built once at
    import time and passed to every text function, so no module keeps
    mutable vocabulary state.

Key Classes:
    - TokenizerConfig: Stop words and length thresholds

Dependencies:
    - dataclasses (std)

Used By:
    - text.tokenizer, text.similarity, text.keywords
    - grading.heuristic
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable


# Common English function words: articles, conjunctions, pronouns,
# auxiliaries and short prepositions.
STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "then", "else", "when", "while",
    "of", "to", "in", "on", "at", "by", "for", "from", "with",
    "is", "are", "was", "were", "be", "been", "being", "as", "it", "this", "that",
    "these", "those", "we", "you", "they", "i", "he", "she",
    "not", "no", "yes", "do", "does", "did", "done", "can", "could", "should",
    "would", "may", "might", "must", "will", "shall",
    "there", "here", "than", "so", "such", "also", "into", "over", "under",
    "between", "within", "without",
})


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Configuration for tokenization (immutable).

    Attributes:
        stop_words: Lowercase words dropped from every token stream
        min_token_length: Shortest token kept (default 2)
        keyword_min_length: Shortest token treated as a content word by
            keyword analysis (default 5)

    Invariants:
        - min_token_length >= 1
        - keyword_min_length >= min_token_length

    Example:
        >>> config = TokenizerConfig().with_stop_words(["explain"])
        >>> "explain" in config.stop_words
        True
    """

    stop_words: FrozenSet[str] = field(default=STOP_WORDS)
    min_token_length: int = 2
    keyword_min_length: int = 5

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length must be positive: {self.min_token_length}")
        if self.keyword_min_length < self.min_token_length:
            raise ValueError(
                f"keyword_min_length ({self.keyword_min_length}) must be >= "
                f"min_token_length ({self.min_token_length})"
            )
        if not isinstance(self.stop_words, frozenset):
            object.__setattr__(self, "stop_words", frozenset(self.stop_words))

    def with_stop_words(self, extra: Iterable[str]) -> TokenizerConfig:
        """Return a copy whose stop-word set also contains `extra` (lowercased)."""
        words = self.stop_words | {w.strip().lower() for w in extra if w and w.strip()}
        return replace(self, stop_words=frozenset(words))


DEFAULT_TOKENIZER_CONFIG = TokenizerConfig()
