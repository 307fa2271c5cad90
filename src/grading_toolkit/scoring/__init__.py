"""
Scoring Package

Recovers a hand-written or printed score ("23/30") from noisy
recognized text. Independent of answer segmentation and grading.
"""

from .config import ScoreRequest
from .extractor import extract_score, extract_score_from_text, normalize_score_text
from .strategies import (
    DEFAULT_STRATEGIES,
    ScoreContext,
    ScoreStrategy,
    StrategyOutcome,
    collect_pair_candidates,
    pick_best_pair,
    run_strategies,
)

__all__ = [
    "ScoreRequest",
    "extract_score",
    "extract_score_from_text",
    "normalize_score_text",
    "DEFAULT_STRATEGIES",
    "ScoreContext",
    "ScoreStrategy",
    "StrategyOutcome",
    "collect_pair_candidates",
    "pick_best_pair",
    "run_strategies",
]
