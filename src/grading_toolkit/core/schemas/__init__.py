"""
Schemas Package

JSON schema definitions and validation utilities for wire-format results.
"""

from .validator import (
    validate_evaluation,
    validate_extracted_score,
    load_schema,
    ValidationError,
    EVALUATION_SCHEMA,
    EXTRACTED_SCORE_SCHEMA,
)

__all__ = [
    "validate_evaluation",
    "validate_extracted_score",
    "load_schema",
    "ValidationError",
    "EVALUATION_SCHEMA",
    "EXTRACTED_SCORE_SCHEMA",
]
