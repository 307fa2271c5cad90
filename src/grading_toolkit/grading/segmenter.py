"""
Module: grading.segmenter

Purpose:
    Answer segmentation - splits a raw multi-question answer sheet into
    an ordered list of question spans using question markers such as
    "Q1:", "Question 2 -", "3." or "4)".

Key Functions:
    - find_question_markers(): Locate every marker in normalized text
    - extract_qa_pairs(): Raw text -> ordered QuestionAnswerSpan list

Dependencies:
    - re (std)
    - grading_toolkit.core.models.answers: QuestionAnswerSpan

Used By:
    - grading.heuristic.grade_texts
    - cli: `segment` and `grade` subcommands
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List

from grading_toolkit.core.models.answers import QuestionAnswerSpan, question_sort_key

logger = logging.getLogger(__name__)

# Start of text or a newline, optional indentation, optional "Q"/"Question",
# 1-3 digits, then one of : . ) -
QUESTION_MARKER_RE = re.compile(
    r"(^|\n)\s*(?:Q(?:uestion)?\s*)?([0-9]{1,3})\s*[:.)\-]\s*",
    re.IGNORECASE,
)

# Id used when a sheet carries no markers at all
DEFAULT_QUESTION_ID = "1"


@dataclass(frozen=True)
class QuestionMarker:
    """
    A detected question marker.

    Attributes:
        question_id: Digits as written (e.g. "07" stays "07")
        start: Offset where the marker line starts (after the newline)
        end: Offset immediately after the marker and trailing whitespace
    """
    question_id: str
    start: int
    end: int


def normalize_newlines(raw_text: str) -> str:
    """Convert CRLF line endings to LF and trim."""
    return raw_text.replace("\r\n", "\n").strip()


def find_question_markers(text: str) -> List[QuestionMarker]:
    """
    Locate question markers in normalized text.

    A marker's trailing whitespace is consumed, including a newline, so a
    marker line that holds nothing else swallows the line break that a
    marker on the next line would need. "1.\\n2. x" therefore yields one
    marker whose span is "2. x".

    Args:
        text: Text with LF line endings

    Returns:
        Markers in text order (duplicates kept)
    """
    markers: List[QuestionMarker] = []
    for match in QUESTION_MARKER_RE.finditer(text):
        markers.append(
            QuestionMarker(
                question_id=match.group(2),
                start=match.start() + len(match.group(1)),
                end=match.end(),
            )
        )
    return markers


def extract_qa_pairs(raw_text: str) -> List[QuestionAnswerSpan]:
    """
    Split raw answer text into per-question spans.

    Each span runs from the end of its marker to the start of the next
    marker (or the end of text) and is trimmed. When a question id is
    repeated, e.g. by a page header reprinted on every scanned page, the
    last occurrence wins and earlier ones are discarded, not merged.

    Never raises: empty input gives [], and text without any marker
    becomes the single answer to question "1".

    Args:
        raw_text: Recognized answer-sheet text

    Returns:
        Spans sorted by numeric question id ("2" before "10")

    Example:
        >>> extract_qa_pairs("Q1: apple\\nQ2: banana\\nQ1: cherry")
        [QuestionAnswerSpan(question_id='1', text='cherry'), QuestionAnswerSpan(question_id='2', text='banana')]
    """
    text = normalize_newlines(raw_text or "")
    if not text:
        return []

    markers = find_question_markers(text)
    if not markers:
        logger.debug("No question markers found; treating text as a single answer")
        return [QuestionAnswerSpan(DEFAULT_QUESTION_ID, text)]

    by_id: Dict[str, QuestionAnswerSpan] = {}
    for i, marker in enumerate(markers):
        end = markers[i + 1].start if i + 1 < len(markers) else len(text)
        span = QuestionAnswerSpan(marker.question_id, text[marker.end:end].strip())
        if marker.question_id in by_id:
            logger.debug(f"Question {marker.question_id} repeated; keeping later occurrence")
        by_id[marker.question_id] = span

    logger.debug(f"Found {len(markers)} markers for {len(by_id)} questions")
    return sorted(by_id.values(), key=lambda s: question_sort_key(s.question_id))
