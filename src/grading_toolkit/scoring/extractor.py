"""
Module: scoring.extractor

Purpose:
    Noisy score extraction - recovers an obtained/out-of pair from
    recognized text such as a photographed score box, with a confidence
    that tells the caller whether to ask for manual correction.

Key Functions:
    - normalize_score_text(): Lowercase and collapse whitespace
    - extract_score_from_text(): Text -> ExtractedScore
    - extract_score(): Same, driven by a validated ScoreRequest

Strategy order:
    1. Best fraction / "out of" pair        (0.95 or 0.85)
    2. Number near the label hint           (0.65, needs expected total)
    3. First number in [0, 100]             (0.25)
    4. Nothing found                        (0.0)

Dependencies:
    - re (std)
    - grading_toolkit.scoring.strategies

Used By:
    - cli: `score` subcommand
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from grading_toolkit.common.thresholds import DEFAULT_SCORE_THRESHOLDS, ScoreThresholds
from grading_toolkit.core.models.scores import ExtractedScore

from .config import ScoreRequest
from .strategies import (
    DEFAULT_STRATEGIES,
    ScoreContext,
    ScoreStrategy,
    collect_pair_candidates,
    run_strategies,
)

logger = logging.getLogger(__name__)

# Any whitespace except the newline, including no-break spaces from OCR
_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")


def normalize_score_text(text: str) -> str:
    """
    Normalize recognized text for pattern matching.

    Example:
        >>> normalize_score_text("  Total\\tMARKS:  17 \\r\\n")
        'total marks: 17'
    """
    text = (text or "").lower().replace("\r\n", "\n")
    return _HORIZONTAL_WS_RE.sub(" ", text).strip()


def extract_score_from_text(
    text: str,
    expected_out_of: Optional[int] = None,
    label_hint: Optional[str] = None,
    *,
    strategies: Sequence[ScoreStrategy] = DEFAULT_STRATEGIES,
    thresholds: ScoreThresholds = DEFAULT_SCORE_THRESHOLDS,
) -> ExtractedScore:
    """
    Recover the best-guess score from noisy text.

    Never raises: text without any number yields obtained=None with
    confidence 0. The result's candidates hold every fraction and
    "out of" match found, whichever strategy won, so callers can audit
    the choice.

    Args:
        text: Recognized text
        expected_out_of: Known total for the paper, if any
        label_hint: Word printed next to the score (default "marks")
        strategies: Ordered strategies; the first to fire wins
        thresholds: Bonuses, confidences and windows

    Returns:
        ExtractedScore

    Example:
        >>> s = extract_score_from_text("Scored 23/30 on the test", expected_out_of=30)
        >>> (s.obtained, s.out_of, s.method.value, s.confidence)
        (23, 30, 'fraction', 0.95)
    """
    normalized = normalize_score_text(text)
    label = (label_hint or "").strip().lower() or thresholds.default_label_hint

    context = ScoreContext(
        text=normalized,
        expected_out_of=expected_out_of,
        label_hint=label,
        pair_candidates=collect_pair_candidates(normalized),
        thresholds=thresholds,
    )
    logger.debug(f"Found {len(context.pair_candidates)} score pair candidates")

    return run_strategies(context, strategies)


def extract_score(text: str, request: ScoreRequest | None = None) -> ExtractedScore:
    """Extract a score using validated request options."""
    request = request or ScoreRequest()
    score = extract_score_from_text(
        text,
        expected_out_of=request.expected_out_of,
        label_hint=request.label_hint,
    )
    logger.info(
        f"Extracted score {score.obtained}/{score.out_of} "
        f"via {score.method.value} (confidence {score.confidence})"
    )
    return score
