"""
Module: text.keywords

Purpose:
    Keyword gap analysis: which content words of a model answer are
    absent from a student answer, and which are most salient when there
    is no student answer at all.

Key Functions:
    - missing_keywords(): Model content words the student never used
    - extract_key_phrases(): Most frequent model content words
    - rank_terms(): Frequency-rank an arbitrary list of terms

Ranking is by descending count with a stable sort, so equal counts keep
the order in which the terms were first seen.

Dependencies:
    - collections (std)
    - grading_toolkit.text.tokenizer

Used By:
    - grading.heuristic: Deductions, feedback and weak areas
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from .config import DEFAULT_TOKENIZER_CONFIG, TokenizerConfig
from .tokenizer import term_frequency, tokenize


def _content_frequency(text: str, config: TokenizerConfig) -> Counter:
    """Count tokens long enough to count as content words."""
    return term_frequency(
        t for t in tokenize(text, config) if len(t) >= config.keyword_min_length
    )


def _top(freq: Counter, limit: int) -> List[str]:
    # sorted() is stable: ties stay in first-seen order
    ranked = sorted(freq.items(), key=lambda item: -item[1])
    return [term for term, _ in ranked[:max(0, limit)]]


def missing_keywords(
    model: str,
    student: str,
    limit: int,
    config: TokenizerConfig = DEFAULT_TOKENIZER_CONFIG,
) -> List[str]:
    """
    Content words of the model answer that never appear in the student answer.

    Args:
        model: Model answer text
        student: Student answer text
        limit: Maximum number of keywords returned
        config: Tokenizer configuration

    Returns:
        Up to `limit` keywords, most frequent in the model answer first

    Example:
        >>> missing_keywords("chlorophyll absorbs light energy", "light is absorbed", 6)
        ['chlorophyll', 'absorbs', 'energy']
    """
    student_tokens = set(tokenize(student, config))
    freq = _content_frequency(model, config)
    remaining = Counter({term: n for term, n in freq.items() if term not in student_tokens})
    return _top(remaining, limit)


def extract_key_phrases(
    model: str,
    limit: int,
    config: TokenizerConfig = DEFAULT_TOKENIZER_CONFIG,
) -> List[str]:
    """Most frequent content words of a model answer (no student to compare)."""
    return _top(_content_frequency(model, config), limit)


def rank_terms(terms: Iterable[str], limit: int) -> List[str]:
    """Distinct terms ordered by how often they occur, truncated to `limit`."""
    return _top(term_frequency(terms), limit)
