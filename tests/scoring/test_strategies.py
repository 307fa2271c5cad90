"""
Unit tests for scoring.strategies.
"""

from grading_toolkit.common.thresholds import ScoreThresholds
from grading_toolkit.core.models.scores import ScoreCandidate, ScoreMethod
from grading_toolkit.scoring.strategies import (
    ScoreContext,
    ScoreStrategy,
    best_pair_strategy,
    collect_pair_candidates,
    fallback_number_strategy,
    find_number_near_label,
    label_proximity_strategy,
    pick_best_pair,
    run_strategies,
)


class TestCollectPairCandidates:
    """Tests for collect_pair_candidates()."""

    def test_collect_when_mixed_pairs_then_valid_ones_in_pattern_order(self):
        candidates = collect_pair_candidates("q1 4/5, q2 9/5, total 13 out of 20")
        assert candidates == (
            ScoreCandidate(4, 5, "4/5"),
            ScoreCandidate(13, 20, "13 out of 20"),
        )

    def test_collect_when_no_pairs_then_empty(self):
        assert collect_pair_candidates("marks 17") == ()


class TestPickBestPair:
    """Tests for pick_best_pair()."""

    def test_pick_when_empty_then_none(self):
        assert pick_best_pair(()) is None

    def test_pick_when_custom_bonus_then_expected_ignored(self):
        """With no expected bonus the larger denominator still wins."""
        candidates = (ScoreCandidate(4, 5, "4/5"), ScoreCandidate(40, 50, "40/50"))
        thresholds = ScoreThresholds(expected_out_of_bonus=0)
        assert pick_best_pair(candidates, 5, thresholds).raw == "40/50"

    def test_pick_when_out_of_larger_by_more_than_bonus_then_out_of_wins(self):
        candidates = (ScoreCandidate(9, 10, "9/10"), ScoreCandidate(30, 40, "30 out of 40"))
        assert pick_best_pair(candidates).raw == "30 out of 40"


class TestStrategies:
    """Tests for the individual strategies."""

    def test_best_pair_when_no_candidates_then_none(self):
        assert best_pair_strategy(ScoreContext(text="23/30")) is None

    def test_label_when_no_expected_then_none(self):
        assert label_proximity_strategy(ScoreContext(text="marks 17")) is None

    def test_label_when_found_then_candidate_attached(self):
        outcome = label_proximity_strategy(ScoreContext(text="marks 17", expected_out_of=20))
        assert outcome.method == ScoreMethod.LABEL
        assert outcome.candidate == ScoreCandidate(17, 20, "marks: 17")

    def test_fallback_when_no_number_then_none(self):
        assert fallback_number_strategy(ScoreContext(text="nothing")) is None

    def test_find_number_when_label_then_first_number_in_window(self):
        assert find_number_near_label("page 3 marks obtained 17", "marks", 20) == 17

    def test_find_number_when_window_too_small_then_none(self):
        assert find_number_near_label("marks obtained 17", "marks", 20, window=10) is None


class TestRunStrategies:
    """Tests for run_strategies()."""

    def test_run_when_no_strategies_then_failure_keeps_candidates(self):
        candidates = (ScoreCandidate(4, 5, "4/5"),)
        context = ScoreContext(text="4/5", expected_out_of=10, pair_candidates=candidates)
        score = run_strategies(context, ())
        assert (score.obtained, score.out_of, score.confidence) == (None, 10, 0.0)
        assert score.method == ScoreMethod.FALLBACK
        assert score.candidates == candidates

    def test_run_when_reordered_then_first_firing_strategy_wins(self):
        """Label before pairs: the label result wins and is appended to candidates."""
        text = "marks: 17 and 18/20"
        context = ScoreContext(
            text=text,
            expected_out_of=20,
            pair_candidates=collect_pair_candidates(text),
        )
        strategies = (
            ScoreStrategy("label_proximity", label_proximity_strategy),
            ScoreStrategy("best_pair", best_pair_strategy),
        )
        score = run_strategies(context, strategies)
        assert (score.obtained, score.method) == (17, ScoreMethod.LABEL)
        assert score.candidates == (
            ScoreCandidate(18, 20, "18/20"),
            ScoreCandidate(17, 20, "marks: 17"),
        )
