"""
Grading Toolkit Core Package

Shared data models, wire schemas and serialization used by every
pipeline. Models are frozen dataclasses; totals are always calculated
from their parts.
"""

from .models import (
    Deduction,
    Evaluation,
    ExtractedScore,
    QuestionAnswerSpan,
    QuestionResult,
    ScoreCandidate,
    ScoreMethod,
)

__all__ = [
    "QuestionAnswerSpan",
    "Deduction",
    "QuestionResult",
    "Evaluation",
    "ScoreMethod",
    "ScoreCandidate",
    "ExtractedScore",
]
