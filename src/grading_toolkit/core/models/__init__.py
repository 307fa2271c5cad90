"""
Core Models Package

Immutable, validated data models shared by the grading and scoring
pipelines.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation after a result is produced
2. Safe to pass between threads
3. Totals are derived from their parts, never stored separately
"""

from .answers import QuestionAnswerSpan
from .evaluation import Deduction, Evaluation, QuestionResult
from .scores import ExtractedScore, ScoreCandidate, ScoreMethod

__all__ = [
    "QuestionAnswerSpan",
    "Deduction",
    "QuestionResult",
    "Evaluation",
    "ScoreMethod",
    "ScoreCandidate",
    "ExtractedScore",
]
