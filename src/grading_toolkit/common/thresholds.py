"""Centralized threshold and magic number configuration.

This module contains the constants used by heuristic grading and score
extraction. Having these in one place makes tuning easier and documents
why each value was chosen. All threshold sets are frozen so a single
instance can be shared between threads.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GradingThresholds:
    """Thresholds for heuristic (non-AI) grading."""

    confidence: float = 0.35  # Reported confidence for every heuristic evaluation
    mark_step: float = 0.5  # Marks are rounded to the nearest half mark
    missing_keyword_limit: int = 6  # Keywords cited per question
    key_phrase_limit: int = 6  # Key phrases surfaced for blank answers
    weak_area_limit: int = 10  # Top-level weak areas kept after aggregation


@dataclass(frozen=True)
class ScoreThresholds:
    """Thresholds for noisy score extraction."""

    # Pair selection
    expected_out_of_bonus: int = 1000  # Dominates any realistic denominator
    fraction_bonus: int = 5  # "23/30" is a stronger signal than "23 out of 30"

    # Confidence per strategy
    expected_match_confidence: float = 0.95
    pair_confidence: float = 0.85
    label_confidence: float = 0.65
    fallback_confidence: float = 0.25

    # Label proximity
    label_window_chars: int = 60  # Characters scanned from the label onwards
    default_label_hint: str = "marks"

    # Fallback
    fallback_max_value: int = 100  # Largest number accepted as a bare score


DEFAULT_GRADING_THRESHOLDS = GradingThresholds()
DEFAULT_SCORE_THRESHOLDS = ScoreThresholds()
