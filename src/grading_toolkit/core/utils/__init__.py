"""
Core Utilities Package
"""

from .serialization import (
    serialize_evaluation,
    deserialize_evaluation,
    evaluation_to_json,
    evaluation_from_json,
    serialize_score,
    deserialize_score,
    score_to_json,
    score_from_json,
    spans_to_json,
)

__all__ = [
    "serialize_evaluation",
    "deserialize_evaluation",
    "evaluation_to_json",
    "evaluation_from_json",
    "serialize_score",
    "deserialize_score",
    "score_to_json",
    "score_from_json",
    "spans_to_json",
]
