"""
Module: scoring.config

Purpose:
    Caller-side options for score extraction, validated on construction.
    extract_score_from_text() itself accepts anything and never raises.

Key Classes:
    - ScoreRequest: Expected total and label hint

Dependencies:
    - dataclasses (std)

Used By:
    - scoring.extractor.extract_score
    - cli: `score` subcommand
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MIN_EXPECTED_OUT_OF = 1
MAX_EXPECTED_OUT_OF = 1000


@dataclass(frozen=True)
class ScoreRequest:
    """
    Options for extracting a score (immutable).

    Attributes:
        expected_out_of: Known total for the paper, if any
        label_hint: Word printed next to the score box, e.g. "marks",
            "score" or "total"

    Invariants:
        - expected_out_of is None or an int in [1, 1000]
        - label_hint is None or non-blank
    """

    expected_out_of: Optional[int] = None
    label_hint: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate options on construction."""
        value = self.expected_out_of
        if value is not None and (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_EXPECTED_OUT_OF <= value <= MAX_EXPECTED_OUT_OF
        ):
            raise ValueError(
                f"expected_out_of must be an integer in "
                f"[{MIN_EXPECTED_OUT_OF}, {MAX_EXPECTED_OUT_OF}]: {value!r}"
            )
        if self.label_hint is not None and not self.label_hint.strip():
            raise ValueError("label_hint must not be blank")
