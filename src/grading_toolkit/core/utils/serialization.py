"""
Serialization Utilities

Provides to/from JSON utilities for result models.

- `serialize_*` returns the camelCase wire dictionary
- `deserialize_*` validates against the packaged schema first
- `*_to_json` / `*_from_json` wrap the above with json.dumps/loads
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from ..models.answers import QuestionAnswerSpan
from ..models.evaluation import Evaluation
from ..models.scores import ExtractedScore
from ..schemas.validator import validate_evaluation, validate_extracted_score


# ─────────────────────────────────────────────────────────────────────────────
# Evaluation Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_evaluation(evaluation: Evaluation) -> dict[str, Any]:
    """
    Serialize an Evaluation to a dictionary.

    The output can be written to JSON and will pass schema validation.
    """
    return evaluation.to_dict()


def deserialize_evaluation(data: dict[str, Any], *, validate: bool = True) -> Evaluation:
    """
    Deserialize an Evaluation from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first

    Returns:
        Evaluation instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data violates a model invariant
    """
    if validate:
        validate_evaluation(data)
    return Evaluation.from_dict(data)


def evaluation_to_json(evaluation: Evaluation, *, indent: int | None = 2) -> str:
    return json.dumps(serialize_evaluation(evaluation), indent=indent, ensure_ascii=False)


def evaluation_from_json(text: str, *, validate: bool = True) -> Evaluation:
    return deserialize_evaluation(json.loads(text), validate=validate)


# ─────────────────────────────────────────────────────────────────────────────
# Extracted Score Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_score(score: ExtractedScore) -> dict[str, Any]:
    """Serialize an ExtractedScore to a dictionary."""
    return score.to_dict()


def deserialize_score(data: dict[str, Any], *, validate: bool = True) -> ExtractedScore:
    """
    Deserialize an ExtractedScore from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_extracted_score(data)
    return ExtractedScore.from_dict(data)


def score_to_json(score: ExtractedScore, *, indent: int | None = 2) -> str:
    return json.dumps(serialize_score(score), indent=indent, ensure_ascii=False)


def score_from_json(text: str, *, validate: bool = True) -> ExtractedScore:
    return deserialize_score(json.loads(text), validate=validate)


# ─────────────────────────────────────────────────────────────────────────────
# Span Serialization
# ─────────────────────────────────────────────────────────────────────────────

def spans_to_json(spans: Iterable[QuestionAnswerSpan], *, indent: int | None = 2) -> str:
    return json.dumps([s.to_dict() for s in spans], indent=indent, ensure_ascii=False)
