"""
Shared constants and helpers used by the grading and scoring subpackages.
"""

from .thresholds import (
    DEFAULT_GRADING_THRESHOLDS,
    DEFAULT_SCORE_THRESHOLDS,
    GradingThresholds,
    ScoreThresholds,
)

__all__ = [
    "GradingThresholds",
    "ScoreThresholds",
    "DEFAULT_GRADING_THRESHOLDS",
    "DEFAULT_SCORE_THRESHOLDS",
]
