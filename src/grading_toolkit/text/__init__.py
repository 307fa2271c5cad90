"""
Text Analysis Package

Tokenization, term-frequency similarity and keyword gap analysis over
plain text. Every function takes an optional TokenizerConfig.
"""

from .config import DEFAULT_TOKENIZER_CONFIG, STOP_WORDS, TokenizerConfig
from .keywords import extract_key_phrases, missing_keywords, rank_terms
from .similarity import cosine_similarity
from .tokenizer import term_frequency, tokenize

__all__ = [
    "TokenizerConfig",
    "DEFAULT_TOKENIZER_CONFIG",
    "STOP_WORDS",
    "tokenize",
    "term_frequency",
    "cosine_similarity",
    "missing_keywords",
    "extract_key_phrases",
    "rank_terms",
]
