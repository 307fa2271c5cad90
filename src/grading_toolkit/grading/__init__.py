"""
Grading Package

Answer segmentation and heuristic grading of a student submission
against a model answer key.

Pipeline:
    raw text -> extract_qa_pairs() -> grade_submission_heuristic() -> Evaluation
"""

from .config import GradingConfig
from .heuristic import grade_question, grade_submission_heuristic, grade_texts
from .segmenter import extract_qa_pairs, find_question_markers

__all__ = [
    "GradingConfig",
    "extract_qa_pairs",
    "find_question_markers",
    "grade_question",
    "grade_submission_heuristic",
    "grade_texts",
]
