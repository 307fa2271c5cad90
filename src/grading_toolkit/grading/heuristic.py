"""
Module: grading.heuristic

Purpose:
    Heuristic (non-AI) grading. Pairs model and student spans by
    question id and awards marks from lexical similarity, citing the
    model-answer keywords the student missed.

Key Functions:
    - grade_question(): One question -> QuestionResult
    - grade_submission_heuristic(): Span lists -> Evaluation
    - grade_texts(): Raw texts -> Evaluation (segments first)

Dependencies:
    - grading_toolkit.text: Similarity and keyword analysis
    - grading_toolkit.core.models: Result models

Used By:
    - cli: `grade` subcommand
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from grading_toolkit.common.thresholds import DEFAULT_GRADING_THRESHOLDS, GradingThresholds
from grading_toolkit.core.models.answers import (
    QuestionAnswerSpan,
    sorted_question_ids,
    spans_to_mapping,
)
from grading_toolkit.core.models.evaluation import Deduction, Evaluation, QuestionResult
from grading_toolkit.text.config import DEFAULT_TOKENIZER_CONFIG, TokenizerConfig
from grading_toolkit.text.keywords import extract_key_phrases, missing_keywords, rank_terms
from grading_toolkit.text.similarity import cosine_similarity

from .config import GradingConfig
from .segmenter import extract_qa_pairs

logger = logging.getLogger(__name__)

OVERALL_FEEDBACK = (
    "Heuristic grading used (free, no LLM). For best accuracy and richer feedback, "
    "grade with an AI model or review the marks manually."
)

FEEDBACK_BLANK = "No answer detected for this question."
FEEDBACK_NO_MODEL = "Model answer for this question was not detected; cannot grade reliably."
FEEDBACK_FULL = "Matches the model answer closely."
FEEDBACK_GENERIC = "Partially correct. Add more specific points from the model answer."

REASON_BLANK = "Blank or unreadable answer"
REASON_NO_MODEL = "Missing model answer"
REASON_DIFFERS = "Answer differs from model key"


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def round_to_step(value: float, step: float = 0.5) -> float:
    """
    Round to the nearest multiple of `step`, halves rounding up.

    Python's round() rounds halves to even, which would turn 1.25 into
    1.0 instead of 1.5.
    """
    return math.floor(value / step + 0.5) * step


def grade_question(
    question_id: str,
    model_answer: str,
    student_answer: str,
    max_marks: float,
    *,
    thresholds: GradingThresholds = DEFAULT_GRADING_THRESHOLDS,
    tokenizer_config: TokenizerConfig = DEFAULT_TOKENIZER_CONFIG,
) -> QuestionResult:
    """
    Grade one question against its model answer.

    Three cases:
        - blank student answer: 0 marks, weak areas are the model
          answer's key phrases
        - no model answer: 0 marks, no weak areas
        - both present: similarity * max_marks, rounded to the nearest
          half mark, with one deduction unless marks are full

    Args:
        question_id: Question identifier
        model_answer: Model answer text (may be empty)
        student_answer: Student answer text (may be empty)
        max_marks: Marks available

    Returns:
        QuestionResult for the question
    """
    model_answer = (model_answer or "").strip()
    student_answer = (student_answer or "").strip()

    if not student_answer:
        weak_areas = (
            extract_key_phrases(model_answer, thresholds.key_phrase_limit, tokenizer_config)
            if model_answer else []
        )
        return QuestionResult(
            question_id=question_id,
            marks_awarded=0,
            max_marks=max_marks,
            feedback=FEEDBACK_BLANK,
            deductions=(Deduction(REASON_BLANK, max_marks),),
            weak_areas=tuple(weak_areas),
        )

    if not model_answer:
        return QuestionResult(
            question_id=question_id,
            marks_awarded=0,
            max_marks=max_marks,
            feedback=FEEDBACK_NO_MODEL,
            deductions=(Deduction(REASON_NO_MODEL, max_marks),),
        )

    similarity = cosine_similarity(model_answer, student_answer, tokenizer_config)
    awarded = float(
        _clamp(round_to_step(similarity * max_marks, thresholds.mark_step), 0, max_marks)
    )
    missing = missing_keywords(
        model_answer, student_answer, thresholds.missing_keyword_limit, tokenizer_config
    )
    logger.debug(
        f"Question {question_id}: similarity={similarity:.3f} "
        f"awarded={awarded}/{max_marks} missing={len(missing)}"
    )

    if awarded == max_marks:
        return QuestionResult(
            question_id=question_id,
            marks_awarded=awarded,
            max_marks=max_marks,
            feedback=FEEDBACK_FULL,
            weak_areas=tuple(missing),
        )

    if missing:
        listed = ", ".join(missing)
        reason = f"Missing key points: {listed}"
        feedback = f"Partially correct. Improve coverage of: {listed}."
    else:
        reason = REASON_DIFFERS
        feedback = FEEDBACK_GENERIC

    return QuestionResult(
        question_id=question_id,
        marks_awarded=awarded,
        max_marks=max_marks,
        feedback=feedback,
        deductions=(Deduction(reason, _clamp(max_marks - awarded, 0, max_marks)),),
        weak_areas=tuple(missing),
    )


def grade_submission_heuristic(
    model_spans: Sequence[QuestionAnswerSpan],
    student_spans: Sequence[QuestionAnswerSpan],
    max_marks_per_question: float,
    *,
    thresholds: GradingThresholds = DEFAULT_GRADING_THRESHOLDS,
    tokenizer_config: TokenizerConfig = DEFAULT_TOKENIZER_CONFIG,
) -> Evaluation:
    """
    Grade a submission without any external model.

    Every question id present on either side gets exactly one result,
    in ascending numeric order. Top-level weak areas are the per-question
    weak areas ranked by how many questions cite them.

    Args:
        model_spans: Segmented model answer key
        student_spans: Segmented student submission
        max_marks_per_question: Marks available for each question. The
            caller validates it (see GradingConfig).

    Returns:
        Evaluation with a fixed low confidence

    Example:
        >>> model = [QuestionAnswerSpan("1", "Plants make glucose")]
        >>> student = [QuestionAnswerSpan("1", "Plants make glucose")]
        >>> grade_submission_heuristic(model, student, 5).total_marks
        5.0
    """
    model_by_id = spans_to_mapping(model_spans)
    student_by_id = spans_to_mapping(student_spans)

    questions: List[QuestionResult] = [
        grade_question(
            qid,
            model_by_id.get(qid, ""),
            student_by_id.get(qid, ""),
            max_marks_per_question,
            thresholds=thresholds,
            tokenizer_config=tokenizer_config,
        )
        for qid in sorted_question_ids(model_by_id, student_by_id)
    ]

    weak_areas = rank_terms(
        (term for q in questions for term in q.weak_areas),
        thresholds.weak_area_limit,
    )

    evaluation = Evaluation.from_questions(
        questions,
        overall_feedback=OVERALL_FEEDBACK,
        weak_areas=weak_areas,
        confidence=thresholds.confidence,
    )
    logger.info(
        f"Heuristic grading: {evaluation.total_marks}/{evaluation.max_total_marks} "
        f"across {len(questions)} questions"
    )
    return evaluation


def grade_texts(
    model_text: str,
    student_text: str,
    config: GradingConfig | None = None,
) -> Evaluation:
    """
    Segment raw model and student texts, then grade them.

    Args:
        model_text: Raw model answer key text
        student_text: Raw student submission text
        config: Validated grading configuration (defaults to 5 marks
            per question)

    Returns:
        Evaluation for the submission
    """
    config = config or GradingConfig()
    model_spans = extract_qa_pairs(model_text)
    student_spans = extract_qa_pairs(student_text)
    logger.debug(
        f"Segmented {len(model_spans)} model and {len(student_spans)} student answers"
    )
    return grade_submission_heuristic(
        model_spans,
        student_spans,
        config.max_marks_per_question,
        thresholds=config.thresholds,
        tokenizer_config=config.tokenizer,
    )
