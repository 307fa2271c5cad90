"""
Module: answers

Purpose:
    Provides the QuestionAnswerSpan dataclass - one question's slice of
    a raw answer sheet, as produced by the segmenter.

Key Classes:
    - QuestionAnswerSpan: Immutable (question_id, text) pair

Dependencies:
    - dataclasses (std)

Used By:
    - grading.segmenter: Produces spans
    - grading.heuristic: Pairs model and student spans by id
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple


@dataclass(frozen=True, slots=True)
class QuestionAnswerSpan:
    """
    Answer text attributed to one question.

    Attributes:
        question_id: Decimal digits as written on the sheet (e.g. "1", "12").
            Ordering is numeric, so "2" sorts before "10".
        text: Trimmed answer text (may be empty).

    Example:
        >>> span = QuestionAnswerSpan("3", "Photosynthesis uses light")
        >>> span.number
        3
    """

    question_id: str
    text: str

    @property
    def number(self) -> int:
        """Numeric value of the question id."""
        return int(self.question_id)

    @property
    def is_blank(self) -> bool:
        """True when the span carries no answer text."""
        return not self.text.strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape."""
        return {"questionId": self.question_id, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionAnswerSpan:
        """Deserialize from the camelCase wire shape."""
        return cls(question_id=str(data["questionId"]), text=str(data.get("text", "")))


def question_sort_key(question_id: str) -> Tuple[int, int, str]:
    """
    Sort key giving numeric order for question ids.

    Ids that are not plain ASCII digits (e.g. "1a" from a caller building
    spans by hand) sort after all numeric ids, alphabetically.
    """
    if question_id.isascii() and question_id.isdigit():
        return (0, int(question_id), "")
    return (1, 0, question_id)


def spans_to_mapping(spans: Iterable[QuestionAnswerSpan]) -> dict[str, str]:
    """
    Build a question_id -> text mapping.

    Later spans overwrite earlier ones with the same id.
    """
    return {span.question_id: span.text for span in spans}


def sorted_question_ids(*mappings: Iterable[str]) -> list[str]:
    """Union of the ids in all mappings, in ascending numeric order."""
    ids: dict[str, None] = {}
    for mapping in mappings:
        for qid in mapping:
            ids.setdefault(qid, None)
    return sorted(ids, key=question_sort_key)
