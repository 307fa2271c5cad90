"""
Module: evaluation

Purpose:
    Result models for grading a submission: per-question results with
    deductions, and the aggregated Evaluation. Totals are always
    calculated from the questions, never stored independently.

Key Classes:
    - Deduction: Reason and marks subtracted
    - QuestionResult: Marks, feedback and weak areas for one question
    - Evaluation: Whole-submission result

Dependencies:
    - dataclasses (std)

Used By:
    - grading.heuristic: Builds results
    - core.utils.serialization: JSON round-trips
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

# Tolerance for float sums of half marks
_SUM_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class Deduction:
    """
    Marks removed from a question, with a human-readable cause.

    Invariants:
        - marks >= 0
    """

    reason: str
    marks: float

    def __post_init__(self) -> None:
        if self.marks < 0:
            raise ValueError(f"Deduction marks cannot be negative: {self.marks}")

    def to_dict(self) -> dict[str, Any]:
        return {"reason": self.reason, "marks": self.marks}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Deduction:
        return cls(reason=data["reason"], marks=data["marks"])


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """
    Grading outcome for a single question.

    Attributes:
        question_id: Question identifier shared by model and student spans.
        marks_awarded: Marks given (0 <= marks_awarded <= max_marks).
        max_marks: Marks available for the question.
        feedback: One-sentence feedback for the student.
        deductions: Why marks were lost; empty on full marks.
        weak_areas: Terms the student should revisit.

    Example:
        >>> r = QuestionResult("1", 2.5, 5, "Partially correct.")
        >>> r.marks_lost
        2.5
    """

    question_id: str
    marks_awarded: float
    max_marks: float
    feedback: str
    deductions: Tuple[Deduction, ...] = ()
    weak_areas: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.max_marks < 0:
            raise ValueError(f"max_marks cannot be negative: {self.max_marks}")
        if not 0 <= self.marks_awarded <= self.max_marks:
            raise ValueError(
                f"marks_awarded must be within [0, {self.max_marks}]: {self.marks_awarded}"
            )
        for deduction in self.deductions:
            if deduction.marks > self.max_marks:
                raise ValueError(
                    f"Deduction of {deduction.marks} exceeds max_marks {self.max_marks}"
                )

    @property
    def marks_lost(self) -> float:
        return self.max_marks - self.marks_awarded

    @property
    def is_full_marks(self) -> bool:
        return self.marks_awarded == self.max_marks

    def to_dict(self) -> dict[str, Any]:
        return {
            "questionId": self.question_id,
            "marksAwarded": self.marks_awarded,
            "maxMarks": self.max_marks,
            "feedback": self.feedback,
            "deductions": [d.to_dict() for d in self.deductions],
            "weakAreas": list(self.weak_areas),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionResult:
        return cls(
            question_id=str(data["questionId"]),
            marks_awarded=data["marksAwarded"],
            max_marks=data["maxMarks"],
            feedback=data.get("feedback", ""),
            deductions=tuple(Deduction.from_dict(d) for d in data.get("deductions", [])),
            weak_areas=tuple(data.get("weakAreas", [])),
        )


@dataclass(frozen=True, slots=True)
class Evaluation:
    """
    Aggregated grading result for one submission.

    Prefer Evaluation.from_questions() so the totals are derived from the
    questions. Direct construction checks that they agree.

    Invariants:
        - total_marks == sum(q.marks_awarded)
        - max_total_marks == sum(q.max_marks)
        - 0 <= confidence <= 1
    """

    total_marks: float
    max_total_marks: float
    overall_feedback: str
    weak_areas: Tuple[str, ...]
    confidence: float
    questions: Tuple[QuestionResult, ...]

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1]: {self.confidence}")
        awarded = sum(q.marks_awarded for q in self.questions)
        available = sum(q.max_marks for q in self.questions)
        if abs(self.total_marks - awarded) > _SUM_TOLERANCE:
            raise ValueError(
                f"total_marks {self.total_marks} does not match question sum {awarded}"
            )
        if abs(self.max_total_marks - available) > _SUM_TOLERANCE:
            raise ValueError(
                f"max_total_marks {self.max_total_marks} does not match question sum {available}"
            )

    @classmethod
    def from_questions(
        cls,
        questions: Sequence[QuestionResult],
        *,
        overall_feedback: str,
        weak_areas: Iterable[str],
        confidence: float,
    ) -> Evaluation:
        """Build an Evaluation whose totals are summed from the questions."""
        questions = tuple(questions)
        return cls(
            total_marks=sum(q.marks_awarded for q in questions),
            max_total_marks=sum(q.max_marks for q in questions),
            overall_feedback=overall_feedback,
            weak_areas=tuple(weak_areas),
            confidence=confidence,
            questions=questions,
        )

    @property
    def percentage(self) -> float:
        """Score as a percentage; 0 when nothing was available."""
        if not self.max_total_marks:
            return 0.0
        return 100.0 * self.total_marks / self.max_total_marks

    def question(self, question_id: str) -> QuestionResult:
        """Look up a question result by id (KeyError if absent)."""
        for q in self.questions:
            if q.question_id == question_id:
                return q
        raise KeyError(question_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMarks": self.total_marks,
            "maxTotalMarks": self.max_total_marks,
            "overallFeedback": self.overall_feedback,
            "weakAreas": list(self.weak_areas),
            "confidence": self.confidence,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Evaluation:
        return cls(
            total_marks=data["totalMarks"],
            max_total_marks=data["maxTotalMarks"],
            overall_feedback=data.get("overallFeedback", ""),
            weak_areas=tuple(data.get("weakAreas", [])),
            confidence=data["confidence"],
            questions=tuple(QuestionResult.from_dict(q) for q in data.get("questions", [])),
        )
