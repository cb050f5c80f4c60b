# tests/test_dimension_scorer.py

"""
Dimension Scorer Tests - adjustment formula, pairing and edge cases
"""

import pytest

from conftest import answer_all
from orbit.models.assessment import AssessmentResponse
from orbit.models.enumerations import Section, SubSection
from orbit.models.question import Question
from orbit.scoring.dimension_scorer import (
    DIMENSION_PAIRS,
    ITEM_CEILING,
    DimensionScorer,
)
from orbit.scoring.question_catalog import QuestionCatalog


@pytest.fixture
def scorer():
    return DimensionScorer()


class TestItemCeiling:
    """The per-question ceiling is 7, not the 1-5 answer maximum."""

    def test_constant_is_seven(self):
        assert ITEM_CEILING == 7

    def test_scorer_default_uses_constant(self, scorer):
        assert scorer.item_ceiling == 7

    def test_adjusted_uses_ceiling(self, scorer, catalog):
        # 2 questions × 7 = 14
        assert scorer.adjusted_sub_score(SubSection.PRIDE, 0, catalog) == 14
        assert scorer.adjusted_sub_score(SubSection.PRIDE, 10, catalog) == 4


class TestPairing:
    """Sub-sections pair into dimensions in the documented order."""

    def test_pairs(self):
        assert DIMENSION_PAIRS[Section.ESTEEM] == (SubSection.INSECURE, SubSection.PRIDE)
        assert DIMENSION_PAIRS[Section.TRUST] == (SubSection.TRUSTING, SubSection.CAUTIOUS)
        assert DIMENSION_PAIRS[Section.DRIVER] == (SubSection.HUSTLE, SubSection.RESERVED)
        assert DIMENSION_PAIRS[Section.ADAPTABILITY] == (SubSection.FLEXIBLE, SubSection.PRECISE)
        assert DIMENSION_PAIRS[Section.PROBLEM_RESOLUTION] == (SubSection.DIRECT, SubSection.AVOIDANT)

    def test_coachability_not_paired(self):
        assert Section.COACHABILITY not in DIMENSION_PAIRS


class TestScore:
    """DimensionScorer.score()"""

    def test_esteem_worked_example(self, scorer, catalog):
        """Insecure answered 5, 5 and Pride answered 1, 1."""
        responses = [
            AssessmentResponse(question_id="E1A1", score=5),
            AssessmentResponse(question_id="E1A2", score=5),
            AssessmentResponse(question_id="E1B1", score=1),
            AssessmentResponse(question_id="E1B2", score=1),
        ]
        result = scorer.score(responses, catalog)

        assert scorer.adjusted_sub_score(SubSection.INSECURE, result.raw_sub_totals[SubSection.INSECURE], catalog) == 4
        assert scorer.adjusted_sub_score(SubSection.PRIDE, result.raw_sub_totals[SubSection.PRIDE], catalog) == 12
        assert result.esteem == 16

    @pytest.mark.parametrize("answer, expected", [(1, 24), (3, 16), (5, 8)])
    def test_uniform_answers(self, scorer, catalog, answer, expected):
        result = scorer.score(answer_all(catalog, answer), catalog)
        assert result.profile_vector() == (expected,) * 5
        assert result.coachability == 4 * answer
        assert result.answered == 24

    def test_no_responses_gives_baseline(self, scorer, catalog):
        result = scorer.score([], catalog)
        assert result.profile_vector() == (28, 28, 28, 28, 28)
        assert result.coachability == 0
        assert result.answered == 0

    def test_unknown_question_ids_skipped(self, scorer, catalog):
        responses = [
            AssessmentResponse(question_id="GHOST", score=5),
            AssessmentResponse(question_id="E1B1", score=2),
        ]
        result = scorer.score(responses, catalog)
        assert result.answered == 1
        assert result.esteem == 28 - 2

    def test_partial_answers_scored_as_is(self, scorer, catalog):
        responses = [AssessmentResponse(question_id="T2A1", score=4)]
        result = scorer.score(responses, catalog)
        assert result.trust == 24
        assert result.esteem == 28

    def test_coachability_is_raw_sum(self, scorer, catalog):
        responses = [
            AssessmentResponse(question_id="C6A1", score=5),
            AssessmentResponse(question_id="C6A2", score=4),
            AssessmentResponse(question_id="C6A3", score=1),
            AssessmentResponse(question_id="C6A4", score=2),
        ]
        assert scorer.score(responses, catalog).coachability == 12

    def test_reversed_flag_not_applied(self, scorer, catalog):
        """D3B2 is flagged reversed but counts like any other Hustle answer."""
        plain = scorer.score([AssessmentResponse(question_id="D3B1", score=5)], catalog)
        flagged = scorer.score([AssessmentResponse(question_id="D3B2", score=5)], catalog)
        assert plain.driver == flagged.driver == 23

    def test_for_section(self, scorer, catalog):
        result = scorer.score(answer_all(catalog, 2), catalog)
        assert result.for_section(Section.ADAPTABILITY) == 20
        assert result.for_section(Section.COACHABILITY) == 8

    def test_sub_section_size_follows_catalog(self, scorer):
        """max_possible scales with the catalog, not a fixed question count."""
        catalog = QuestionCatalog(
            version="tiny",
            questions=(
                Question(id="P1", text="p", section=Section.ESTEEM, sub_section=SubSection.PRIDE),
                Question(id="P2", text="p", section=Section.ESTEEM, sub_section=SubSection.PRIDE),
                Question(id="P3", text="p", section=Section.ESTEEM, sub_section=SubSection.PRIDE),
                Question(id="I1", text="i", section=Section.ESTEEM, sub_section=SubSection.INSECURE),
            ),
        )
        responses = [AssessmentResponse(question_id=qid, score=1) for qid in ("P1", "P2", "P3", "I1")]
        result = scorer.score(responses, catalog)
        # (3×7 − 3) + (1×7 − 1)
        assert result.esteem == 24
        # empty sub-sections contribute 0 − 0
        assert result.trust == 0

    def test_custom_ceiling(self, catalog):
        result = DimensionScorer(item_ceiling=5).score(answer_all(catalog, 3), catalog)
        assert result.esteem == 8

    def test_deterministic(self, scorer, catalog):
        responses = answer_all(catalog, 2, {SubSection.PRIDE: 5, SubSection.CAUTIOUS: 1})
        assert scorer.score(responses, catalog) == scorer.score(responses, catalog)
