"""
Module: scores

Purpose:
    Models for scores recovered from recognized text, e.g. a photographed
    "23/30" score box.

Key Classes:
    - ScoreMethod: Which extraction strategy produced the score
    - ScoreCandidate: One pattern match found in the text
    - ExtractedScore: Best-guess score with confidence and all candidates

Dependencies:
    - dataclasses, enum (std)

Used By:
    - scoring.strategies / scoring.extractor
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class ScoreMethod(str, Enum):
    """Extraction strategy that produced an ExtractedScore."""

    FRACTION = "fraction"
    OUT_OF = "out_of"
    LABEL = "label"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ScoreCandidate:
    """
    A single score-like match in noisy text.

    Attributes:
        obtained: Marks obtained.
        out_of: Denominator, or None for a bare number.
        raw: Matched text (fractions keep their "/").
    """

    obtained: int
    out_of: Optional[int]
    raw: str

    @property
    def is_fraction(self) -> bool:
        return "/" in self.raw

    def to_dict(self) -> dict[str, Any]:
        return {"obtained": self.obtained, "outOf": self.out_of, "raw": self.raw}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScoreCandidate:
        return cls(obtained=data["obtained"], out_of=data.get("outOf"), raw=data["raw"])


@dataclass(frozen=True, slots=True)
class ExtractedScore:
    """
    Best-guess obtained/out-of pair recovered from text.

    Attributes:
        obtained: Marks obtained, or None when nothing was found.
        out_of: Denominator, or None when unknown.
        confidence: 0..1 trust in the result; callers prompt for manual
            correction when it is low.
        method: Strategy that produced the result.
        candidates: Every fraction/"out of" match found, plus the entry
            added by the winning label or fallback strategy.

    Example:
        >>> s = ExtractedScore(23, 30, 0.85, ScoreMethod.FRACTION)
        >>> s.is_confident()
        True
    """

    obtained: Optional[int]
    out_of: Optional[int]
    confidence: float
    method: ScoreMethod
    candidates: Tuple[ScoreCandidate, ...] = ()

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1]: {self.confidence}")
        if not isinstance(self.method, ScoreMethod):
            # Accept the plain string values used on the wire
            object.__setattr__(self, "method", ScoreMethod(self.method))

    @property
    def found(self) -> bool:
        return self.obtained is not None

    def is_confident(self, threshold: float = 0.5) -> bool:
        """True when confidence reaches the threshold."""
        return self.confidence >= threshold

    def to_dict(self) -> dict[str, Any]:
        return {
            "obtained": self.obtained,
            "outOf": self.out_of,
            "confidence": self.confidence,
            "method": self.method.value,
            "candidates": [c.to_dict() for c in self.candidates],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExtractedScore:
        return cls(
            obtained=data.get("obtained"),
            out_of=data.get("outOf"),
            confidence=data["confidence"],
            method=ScoreMethod(data["method"]),
            candidates=tuple(ScoreCandidate.from_dict(c) for c in data.get("candidates", [])),
        )
