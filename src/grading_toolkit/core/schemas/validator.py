"""
Schema Validation Utilities

Validates wire-format (camelCase JSON) results against the packaged
JSON Schemas, then checks the cross-field invariants a schema cannot
express (totals equal the per-question sums).

Callers that receive evaluations from outside the process (a stored
document, an LLM grader returning the same shape) validate here before
deserializing.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


EVALUATION_SCHEMA = "evaluation"
EXTRACTED_SCORE_SCHEMA = "extracted_score"

# Float sums of half marks
SUM_TOLERANCE = 1e-9

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _run_schema(data: Any, name: str) -> None:
    """Validate against a named schema, reporting every violation."""
    schema = load_schema(name)
    validator = jsonschema.Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        first = errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )


def validate_evaluation(data: dict[str, Any]) -> None:
    """
    Validate an evaluation dictionary.

    Args:
        data: Evaluation in wire format (Evaluation.to_dict() shape)

    Raises:
        ValidationError: If the structure is invalid or totals drift from
            the per-question sums
    """
    _run_schema(data, EVALUATION_SCHEMA)

    questions = data["questions"]
    for i, q in enumerate(questions):
        if q["marksAwarded"] > q["maxMarks"]:
            raise ValidationError(
                f"marksAwarded {q['marksAwarded']} exceeds maxMarks {q['maxMarks']}",
                path=f"questions.{i}.marksAwarded",
            )
        for j, d in enumerate(q["deductions"]):
            if d["marks"] > q["maxMarks"]:
                raise ValidationError(
                    f"Deduction of {d['marks']} exceeds maxMarks {q['maxMarks']}",
                    path=f"questions.{i}.deductions.{j}.marks",
                )

    awarded = sum(q["marksAwarded"] for q in questions)
    if abs(data["totalMarks"] - awarded) > SUM_TOLERANCE:
        raise ValidationError(
            f"totalMarks {data['totalMarks']} does not match question sum {awarded}",
            path="totalMarks",
        )

    available = sum(q["maxMarks"] for q in questions)
    if abs(data["maxTotalMarks"] - available) > SUM_TOLERANCE:
        raise ValidationError(
            f"maxTotalMarks {data['maxTotalMarks']} does not match question sum {available}",
            path="maxTotalMarks",
        )


def validate_extracted_score(data: dict[str, Any]) -> None:
    """
    Validate an extracted score dictionary.

    The fallback strategy pairs any plausible number with the expected
    denominator, so obtained > outOf is not rejected here.

    Raises:
        ValidationError: If the structure is invalid
    """
    _run_schema(data, EXTRACTED_SCORE_SCHEMA)
