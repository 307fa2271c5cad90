"""Top-level package for the grading toolkit.

Provides subpackages:
- grading_toolkit.grading – answer segmentation and heuristic grading
- grading_toolkit.scoring – score extraction from recognized text
- grading_toolkit.text – tokenization, similarity and keyword analysis
- grading_toolkit.core – result models, wire schemas and serialization
"""

from grading_toolkit.core.models import (
    Deduction,
    Evaluation,
    ExtractedScore,
    QuestionAnswerSpan,
    QuestionResult,
    ScoreCandidate,
    ScoreMethod,
)
from grading_toolkit.grading import (
    GradingConfig,
    extract_qa_pairs,
    grade_submission_heuristic,
    grade_texts,
)
from grading_toolkit.scoring import ScoreRequest, extract_score, extract_score_from_text
from grading_toolkit.text import cosine_similarity, extract_key_phrases, missing_keywords, tokenize


def _get_version() -> str:
    """Get the installed distribution version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("grading-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "QuestionAnswerSpan",
    "Deduction",
    "QuestionResult",
    "Evaluation",
    "ScoreMethod",
    "ScoreCandidate",
    "ExtractedScore",
    "GradingConfig",
    "extract_qa_pairs",
    "grade_submission_heuristic",
    "grade_texts",
    "ScoreRequest",
    "extract_score",
    "extract_score_from_text",
    "tokenize",
    "cosine_similarity",
    "missing_keywords",
    "extract_key_phrases",
]
