"""
Module: text.similarity

Purpose:
    Cosine similarity between the term-frequency vectors of two texts.

Key Functions:
    - cosine_similarity(): Normalized lexical overlap in [0, 1]

Dependencies:
    - numpy: Vector dot product and norms
    - grading_toolkit.text.tokenizer

Used By:
    - grading.heuristic: Marks awarded per question
"""

from __future__ import annotations

from collections import Counter
from typing import Tuple

import numpy as np

from .config import DEFAULT_TOKENIZER_CONFIG, TokenizerConfig
from .tokenizer import term_frequency, tokenize


def term_vectors(freq_a: Counter, freq_b: Counter) -> Tuple[np.ndarray, np.ndarray]:
    """
    Align two frequency maps into count vectors over their joint vocabulary.

    The vocabulary is sorted so the vectors do not depend on argument order.
    """
    vocabulary = sorted(set(freq_a) | set(freq_b))
    vec_a = np.array([freq_a.get(term, 0) for term in vocabulary], dtype=np.float64)
    vec_b = np.array([freq_b.get(term, 0) for term in vocabulary], dtype=np.float64)
    return vec_a, vec_b


def cosine_similarity(
    a: str,
    b: str,
    config: TokenizerConfig = DEFAULT_TOKENIZER_CONFIG,
) -> float:
    """
    Cosine similarity of two texts' term-count vectors.

    Returns 0 when either text has no tokens. The result is clamped to
    [0, 1] to absorb floating-point overshoot.

    Example:
        >>> cosine_similarity("binary search tree", "search tree binary")
        1.0
        >>> cosine_similarity("binary search", "linked list")
        0.0
    """
    tokens_a = tokenize(a, config)
    tokens_b = tokenize(b, config)
    if not tokens_a or not tokens_b:
        return 0.0

    vec_a, vec_b = term_vectors(term_frequency(tokens_a), term_frequency(tokens_b))
    norm = np.linalg.norm(vec_a) * np.linalg.norm(vec_b)
    if norm == 0:
        return 0.0

    score = float(np.dot(vec_a, vec_b) / norm)
    return min(1.0, max(0.0, score))
