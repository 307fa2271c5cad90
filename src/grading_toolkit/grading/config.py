"""
Module: grading.config

Purpose:
    Caller-side configuration for grading a submission. The grading
    functions themselves never validate; callers build a GradingConfig,
    which fails fast on construction.

Key Classes:
    - GradingConfig: Marks per question plus tuning objects

Dependencies:
    - dataclasses (std)

Used By:
    - grading.heuristic.grade_texts
    - cli: `grade` subcommand
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grading_toolkit.common.thresholds import DEFAULT_GRADING_THRESHOLDS, GradingThresholds
from grading_toolkit.text.config import DEFAULT_TOKENIZER_CONFIG, TokenizerConfig

MIN_MARKS_PER_QUESTION = 1
MAX_MARKS_PER_QUESTION = 50
DEFAULT_MARKS_PER_QUESTION = 5


@dataclass(frozen=True)
class GradingConfig:
    """
    Configuration for grading a submission (immutable).

    Attributes:
        max_marks_per_question: Marks available for every question
        thresholds: Limits and confidence for heuristic grading
        tokenizer: Stop words and token length rules

    Invariants:
        - max_marks_per_question is an int in [1, 50]

    Example:
        >>> GradingConfig(max_marks_per_question=10).max_marks_per_question
        10
        >>> GradingConfig(max_marks_per_question=0)
        Traceback (most recent call last):
        ...
        ValueError: max_marks_per_question must be an integer in [1, 50]: 0
    """

    max_marks_per_question: int = DEFAULT_MARKS_PER_QUESTION
    thresholds: GradingThresholds = field(default=DEFAULT_GRADING_THRESHOLDS)
    tokenizer: TokenizerConfig = field(default=DEFAULT_TOKENIZER_CONFIG)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        value = self.max_marks_per_question
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_MARKS_PER_QUESTION <= value <= MAX_MARKS_PER_QUESTION
        ):
            raise ValueError(
                f"max_marks_per_question must be an integer in "
                f"[{MIN_MARKS_PER_QUESTION}, {MAX_MARKS_PER_QUESTION}]: {value!r}"
            )
