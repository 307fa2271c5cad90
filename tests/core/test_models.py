"""
Unit Tests for Result Models

Tests for QuestionAnswerSpan, Deduction, QuestionResult, Evaluation,
ScoreCandidate and ExtractedScore.
"""

import dataclasses

import pytest

from grading_toolkit.core.models.answers import (
    QuestionAnswerSpan,
    question_sort_key,
    sorted_question_ids,
    spans_to_mapping,
)
from grading_toolkit.core.models.evaluation import Deduction, Evaluation, QuestionResult
from grading_toolkit.core.models.scores import ExtractedScore, ScoreCandidate, ScoreMethod


def _result(qid="1", awarded=2.5, max_marks=5, deductions=()):
    return QuestionResult(qid, awarded, max_marks, "feedback", deductions)


class TestQuestionAnswerSpan:
    """Tests for QuestionAnswerSpan."""

    def test_number_when_leading_zero_then_numeric(self):
        assert QuestionAnswerSpan("07", "x").number == 7

    def test_is_blank_when_whitespace_then_true(self):
        assert QuestionAnswerSpan("1", "  \n").is_blank

    def test_span_when_frozen_then_immutable(self):
        span = QuestionAnswerSpan("1", "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            span.text = "y"  # type: ignore

    def test_to_dict_when_called_then_camel_case(self):
        assert QuestionAnswerSpan("2", "b").to_dict() == {"questionId": "2", "text": "b"}

    def test_mapping_when_duplicate_ids_then_last_wins(self):
        spans = [QuestionAnswerSpan("1", "a"), QuestionAnswerSpan("1", "b")]
        assert spans_to_mapping(spans) == {"1": "b"}

    def test_sorted_ids_when_union_then_numeric_order(self):
        assert sorted_question_ids({"10": "", "2": ""}, {"2": "", "1": ""}) == ["1", "2", "10"]

    def test_sorted_ids_when_non_numeric_then_after_numeric(self):
        """Ids that are not plain digits sort last instead of raising."""
        assert sorted_question_ids(["1b", "10", "1a", "2"]) == ["2", "10", "1a", "1b"]

    def test_sort_key_when_leading_zero_then_numeric_value(self):
        assert question_sort_key("07") < question_sort_key("10")


class TestDeduction:
    """Tests for Deduction."""

    def test_init_when_negative_then_raises(self):
        with pytest.raises(ValueError, match="negative"):
            Deduction("reason", -0.5)

    def test_to_dict_when_called_then_plain_keys(self):
        assert Deduction("Missing", 2.5).to_dict() == {"reason": "Missing", "marks": 2.5}


class TestQuestionResult:
    """Tests for QuestionResult."""

    def test_init_when_awarded_exceeds_max_then_raises(self):
        with pytest.raises(ValueError, match="marks_awarded"):
            _result(awarded=6, max_marks=5)

    def test_init_when_awarded_negative_then_raises(self):
        with pytest.raises(ValueError):
            _result(awarded=-1)

    def test_init_when_deduction_exceeds_max_then_raises(self):
        with pytest.raises(ValueError, match="exceeds"):
            _result(deductions=(Deduction("too much", 6),))

    def test_marks_lost_when_partial_then_difference(self):
        result = _result(awarded=3.5, max_marks=5)
        assert result.marks_lost == 1.5
        assert not result.is_full_marks

    def test_to_dict_when_called_then_wire_shape(self):
        data = _result(deductions=(Deduction("Missing", 2.5),)).to_dict()
        assert data == {
            "questionId": "1",
            "marksAwarded": 2.5,
            "maxMarks": 5,
            "feedback": "feedback",
            "deductions": [{"reason": "Missing", "marks": 2.5}],
            "weakAreas": [],
        }


class TestEvaluation:
    """Tests for Evaluation."""

    def test_from_questions_when_built_then_totals_summed(self):
        evaluation = Evaluation.from_questions(
            [_result("1", 2.5), _result("2", 5.0)],
            overall_feedback="ok",
            weak_areas=["osmosis"],
            confidence=0.35,
        )
        assert evaluation.total_marks == 7.5
        assert evaluation.max_total_marks == 10
        assert evaluation.percentage == 75.0
        assert evaluation.weak_areas == ("osmosis",)

    def test_init_when_total_mismatch_then_raises(self):
        with pytest.raises(ValueError, match="total_marks"):
            Evaluation(4.0, 5, "", (), 0.35, (_result(awarded=2.5),))

    def test_init_when_max_total_mismatch_then_raises(self):
        with pytest.raises(ValueError, match="max_total_marks"):
            Evaluation(2.5, 6, "", (), 0.35, (_result(awarded=2.5),))

    @pytest.mark.parametrize("confidence", [-0.1, 1.1])
    def test_init_when_confidence_out_of_range_then_raises(self, confidence):
        with pytest.raises(ValueError, match="confidence"):
            Evaluation(0, 0, "", (), confidence, ())

    def test_percentage_when_no_questions_then_zero(self):
        assert Evaluation(0, 0, "", (), 0.35, ()).percentage == 0.0

    def test_question_when_absent_then_key_error(self):
        evaluation = Evaluation.from_questions(
            [_result("1")], overall_feedback="", weak_areas=(), confidence=0.35
        )
        assert evaluation.question("1").marks_awarded == 2.5
        with pytest.raises(KeyError):
            evaluation.question("9")

    def test_from_dict_when_to_dict_output_then_equal(self):
        evaluation = Evaluation.from_questions(
            [_result("1", 2.5, deductions=(Deduction("Missing", 2.5),))],
            overall_feedback="ok",
            weak_areas=["water"],
            confidence=0.35,
        )
        assert Evaluation.from_dict(evaluation.to_dict()) == evaluation


class TestExtractedScore:
    """Tests for ScoreCandidate and ExtractedScore."""

    def test_candidate_when_slash_then_fraction(self):
        assert ScoreCandidate(23, 30, "23/30").is_fraction
        assert not ScoreCandidate(23, 30, "23 out of 30").is_fraction

    def test_init_when_method_string_then_coerced(self):
        score = ExtractedScore(23, 30, 0.85, "fraction")
        assert score.method is ScoreMethod.FRACTION

    def test_init_when_method_unknown_then_raises(self):
        with pytest.raises(ValueError):
            ExtractedScore(23, 30, 0.85, "guess")

    def test_init_when_confidence_out_of_range_then_raises(self):
        with pytest.raises(ValueError, match="confidence"):
            ExtractedScore(23, 30, 1.5, ScoreMethod.FRACTION)

    def test_found_when_obtained_none_then_false(self):
        score = ExtractedScore(None, None, 0.0, ScoreMethod.FALLBACK)
        assert not score.found
        assert not score.is_confident()

    def test_to_dict_when_called_then_method_value(self):
        score = ExtractedScore(17, 20, 0.65, ScoreMethod.LABEL, (ScoreCandidate(17, 20, "marks: 17"),))
        assert score.to_dict() == {
            "obtained": 17,
            "outOf": 20,
            "confidence": 0.65,
            "method": "label",
            "candidates": [{"obtained": 17, "outOf": 20, "raw": "marks: 17"}],
        }
