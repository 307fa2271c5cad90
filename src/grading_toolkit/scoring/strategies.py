"""
Module: scoring.strategies

Purpose:
    Score extraction strategies. Pair candidates ("23/30", "23 out of 30")
    are collected first; then an ordered tuple of strategies is tried and
    the first one that produces an outcome wins.

Key Functions:
    - collect_pair_candidates(): All valid fraction / "out of" matches
    - pick_best_pair(): Rank pair candidates
    - best_pair_strategy / label_proximity_strategy / fallback_number_strategy
    - run_strategies(): First-success-wins reducer

Key Classes:
    - ScoreContext: Normalized text plus caller hints
    - StrategyOutcome: What a successful strategy reports
    - ScoreStrategy: Named strategy callable

Dependencies:
    - re (std)
    - grading_toolkit.core.models.scores

Used By:
    - scoring.extractor: extract_score_from_text()
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from grading_toolkit.common.thresholds import DEFAULT_SCORE_THRESHOLDS, ScoreThresholds
from grading_toolkit.core.models.scores import ExtractedScore, ScoreCandidate, ScoreMethod

logger = logging.getLogger(__name__)

# Digits and word boundaries are ASCII-only
FRACTION_RE = re.compile(r"\b([0-9]{1,3})\s*/\s*([0-9]{1,3})\b", re.ASCII)
OUT_OF_RE = re.compile(r"\b([0-9]{1,3})\s*out\s*of\s*([0-9]{1,3})\b", re.ASCII)
NUMBER_RE = re.compile(r"\b([0-9]{1,3})\b", re.ASCII)

# Scanned in this order; candidate order follows it
PAIR_PATTERNS: Tuple[Pattern[str], ...] = (FRACTION_RE, OUT_OF_RE)


@dataclass(frozen=True)
class ScoreContext:
    """
    Inputs shared by every strategy.

    Attributes:
        text: Normalized (lowercased, whitespace-collapsed) text
        expected_out_of: Caller's known denominator, if any
        label_hint: Lowercased label searched by the label strategy
        pair_candidates: Valid fraction / "out of" matches, in discovery order
        thresholds: Bonuses, confidences and windows
    """
    text: str
    expected_out_of: Optional[int] = None
    label_hint: str = DEFAULT_SCORE_THRESHOLDS.default_label_hint
    pair_candidates: Tuple[ScoreCandidate, ...] = ()
    thresholds: ScoreThresholds = DEFAULT_SCORE_THRESHOLDS


@dataclass(frozen=True)
class StrategyOutcome:
    """
    Result reported by a successful strategy.

    `candidate` is appended to the pair candidates in the final result;
    pair-based strategies leave it None because their winner is already
    in the list.
    """
    obtained: int
    out_of: Optional[int]
    confidence: float
    method: ScoreMethod
    candidate: Optional[ScoreCandidate] = None


@dataclass(frozen=True)
class ScoreStrategy:
    """A named strategy; `apply` returns None when it does not fire."""
    name: str
    apply: Callable[[ScoreContext], Optional[StrategyOutcome]]


# ─────────────────────────────────────────────────────────────────────────────
# Candidate Collection
# ─────────────────────────────────────────────────────────────────────────────

def collect_pair_candidates(
    text: str,
    patterns: Sequence[Pattern[str]] = PAIR_PATTERNS,
) -> Tuple[ScoreCandidate, ...]:
    """
    Collect every plausible obtained/out-of pair.

    A pair is kept only when out_of > 0 and 0 <= obtained <= out_of.

    Example:
        >>> collect_pair_candidates("q1 4/5, q2 9/5, total 13 out of 20")
        (ScoreCandidate(obtained=4, out_of=5, raw='4/5'), ScoreCandidate(obtained=13, out_of=20, raw='13 out of 20'))
    """
    candidates: List[ScoreCandidate] = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            obtained = int(match.group(1))
            out_of = int(match.group(2))
            if out_of <= 0 or not 0 <= obtained <= out_of:
                continue
            candidates.append(ScoreCandidate(obtained, out_of, match.group(0)))
    return tuple(candidates)


def pick_best_pair(
    candidates: Sequence[ScoreCandidate],
    expected_out_of: Optional[int] = None,
    thresholds: ScoreThresholds = DEFAULT_SCORE_THRESHOLDS,
) -> Optional[ScoreCandidate]:
    """
    Choose the most score-like pair.

    Larger denominators win (a full test rather than a sub-part), a
    denominator equal to `expected_out_of` wins outright, and fractions
    beat "out of" phrasing by a small margin. Ties go to the candidate
    discovered first.
    """
    if not candidates:
        return None

    def rank(candidate: ScoreCandidate) -> int:
        score = candidate.out_of or 0
        if expected_out_of is not None and candidate.out_of == expected_out_of:
            score += thresholds.expected_out_of_bonus
        if candidate.is_fraction:
            score += thresholds.fraction_bonus
        return score

    # sorted() is stable, so equal ranks keep discovery order
    return sorted(candidates, key=lambda c: -rank(c))[0]


# ─────────────────────────────────────────────────────────────────────────────
# Strategies
# ─────────────────────────────────────────────────────────────────────────────

def best_pair_strategy(context: ScoreContext) -> Optional[StrategyOutcome]:
    """Best fraction / "out of" pair; 0.95 confidence when it matches the expected total."""
    best = pick_best_pair(context.pair_candidates, context.expected_out_of, context.thresholds)
    if best is None:
        return None
    method = ScoreMethod.FRACTION if best.is_fraction else ScoreMethod.OUT_OF
    matches_expected = (
        context.expected_out_of is not None and best.out_of == context.expected_out_of
    )
    confidence = (
        context.thresholds.expected_match_confidence
        if matches_expected
        else context.thresholds.pair_confidence
    )
    return StrategyOutcome(best.obtained, best.out_of, confidence, method)


def find_number_near_label(
    text: str,
    label: str,
    upper_bound: int,
    window: int = DEFAULT_SCORE_THRESHOLDS.label_window_chars,
) -> Optional[int]:
    """
    First number following a whole-word label that lies in [0, upper_bound].

    Each label occurrence is examined in turn; the window starts at the
    label itself and spans `window` characters. Only the first number in
    each window is considered.

    Example:
        >>> find_number_near_label("page 3 marks obtained 17", "marks", 20)
        17
    """
    label_re = re.compile(rf"\b{re.escape(label)}\b", re.ASCII)
    for match in label_re.finditer(text):
        start = match.start()
        number = NUMBER_RE.search(text[start:start + window])
        if number is None:
            continue
        value = int(number.group(1))
        if 0 <= value <= upper_bound:
            return value
    return None


def label_proximity_strategy(context: ScoreContext) -> Optional[StrategyOutcome]:
    """A number shortly after the label hint; only used with an expected total."""
    if context.expected_out_of is None:
        return None
    obtained = find_number_near_label(
        context.text,
        context.label_hint,
        context.expected_out_of,
        context.thresholds.label_window_chars,
    )
    if obtained is None:
        return None
    return StrategyOutcome(
        obtained=obtained,
        out_of=context.expected_out_of,
        confidence=context.thresholds.label_confidence,
        method=ScoreMethod.LABEL,
        candidate=ScoreCandidate(
            obtained, context.expected_out_of, f"{context.label_hint}: {obtained}"
        ),
    )


def fallback_number_strategy(context: ScoreContext) -> Optional[StrategyOutcome]:
    """
    First number in [0, 100] anywhere in the text.

    Page numbers and dates qualify too, hence the low confidence.
    """
    for match in NUMBER_RE.finditer(context.text):
        value = int(match.group(1))
        if 0 <= value <= context.thresholds.fallback_max_value:
            return StrategyOutcome(
                obtained=value,
                out_of=context.expected_out_of,
                confidence=context.thresholds.fallback_confidence,
                method=ScoreMethod.FALLBACK,
                candidate=ScoreCandidate(value, context.expected_out_of, str(value)),
            )
    return None


DEFAULT_STRATEGIES: Tuple[ScoreStrategy, ...] = (
    ScoreStrategy("best_pair", best_pair_strategy),
    ScoreStrategy("label_proximity", label_proximity_strategy),
    ScoreStrategy("fallback_number", fallback_number_strategy),
)


def run_strategies(
    context: ScoreContext,
    strategies: Sequence[ScoreStrategy] = DEFAULT_STRATEGIES,
) -> ExtractedScore:
    """
    Try strategies in order; the first outcome wins.

    When none fires the result has obtained=None, confidence 0 and
    method "fallback".
    """
    for strategy in strategies:
        outcome = strategy.apply(context)
        if outcome is None:
            continue
        logger.debug(
            f"Score strategy {strategy.name} fired: "
            f"{outcome.obtained}/{outcome.out_of} ({outcome.confidence})"
        )
        candidates = context.pair_candidates
        if outcome.candidate is not None:
            candidates = candidates + (outcome.candidate,)
        return ExtractedScore(
            obtained=outcome.obtained,
            out_of=outcome.out_of,
            confidence=outcome.confidence,
            method=outcome.method,
            candidates=candidates,
        )

    logger.debug("No score strategy fired")
    return ExtractedScore(
        obtained=None,
        out_of=context.expected_out_of,
        confidence=0.0,
        method=ScoreMethod.FALLBACK,
        candidates=context.pair_candidates,
    )
