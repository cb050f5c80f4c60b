# tests/test_profile_classifier.py

"""
Profile Classifier and Banding Tests
"""

import math
from decimal import Decimal

import pytest

from orbit.models.enumerations import ProfileTable, Section
from orbit.scoring.bands import (
    ANY,
    DIMENSIONS,
    HIGH,
    LOW,
    MEDIUM,
    categorize,
    coachability_display,
    normalize_dimension,
)
from orbit.scoring.profile_classifier import (
    ACHIEVER_RULES,
    ARCHETYPE_RULES,
    BALANCED_ACHIEVER,
    PROFILE_DESCRIPTIONS,
    PROFILE_NOT_FOUND,
    ProfileClassifier,
    ProfileRule,
    describe_profile,
    get_classifier,
)


# BANDING


class TestCategorize:
    """Band labels per dimension."""

    @pytest.mark.parametrize("score, label", [
        (-28, "Low"), (13, "Low"), (14, "Medium"), (18, "Medium"), (19, "High"), (28, "High"),
        (-84, "Low"), (84, "High"),
    ])
    def test_generic_bands(self, score, label):
        assert categorize(Section.TRUST, score) == label

    @pytest.mark.parametrize("score, label", [(8, "Flexible"), (16, "Balanced"), (24, "Precise")])
    def test_adaptability_labels(self, score, label):
        assert categorize(Section.ADAPTABILITY, score) == label

    @pytest.mark.parametrize("score, label", [(8, "Avoidant"), (16, "Balanced"), (24, "Direct")])
    def test_problem_resolution_labels(self, score, label):
        assert categorize(Section.PROBLEM_RESOLUTION, score) == label

    @pytest.mark.parametrize("score, label", [
        (10, "Low"), (30, "Low"), (30.5, "Medium"), (40, "Medium"), (42.5, "High"), (50, "High"),
    ])
    def test_coachability_bands(self, score, label):
        assert categorize(Section.COACHABILITY, score) == label


class TestDisplayScales:
    """Normalization and coachability rescaling."""

    def test_normalize_bounds(self):
        assert normalize_dimension(Decimal("-28")) == Decimal("0")
        assert normalize_dimension(Decimal("28")) == Decimal("5")
        assert normalize_dimension(Decimal("0")) == Decimal("2.5")

    def test_normalize_not_clamped(self):
        assert normalize_dimension(Decimal("84")) == Decimal("10")

    def test_coachability_display(self):
        assert coachability_display(Decimal("4"), 4) == Decimal("10")
        assert coachability_display(Decimal("20"), 4) == Decimal("50")
        assert coachability_display(Decimal("12"), 4) == Decimal("30")

    def test_coachability_display_no_questions(self):
        assert coachability_display(Decimal("12"), 0) == Decimal("0")

    def test_dimension_metadata(self):
        assert [d.name for d in DIMENSIONS.values()] == [
            "Esteem", "Trust", "Business Drive", "Adaptability", "Problem Resolution", "Coachability",
        ]
        assert DIMENSIONS[Section.COACHABILITY].min == 10
        assert DIMENSIONS[Section.COACHABILITY].max == 50
        assert DIMENSIONS[Section.ESTEEM].high_label == "prideful"


# CLASSIFICATION


class TestAchieverTable:
    """Canonical table with "The Balanced Achiever" fallback."""

    @pytest.fixture
    def classifier(self):
        return get_classifier(ProfileTable.ACHIEVER)

    def test_default_table_is_achiever(self):
        assert get_classifier().table == ProfileTable.ACHIEVER

    def test_ten_rules(self):
        assert len(ACHIEVER_RULES) == 10

    def test_all_medium_is_balanced(self, classifier):
        assert classifier.classify((16, 16, 16, 16, 16)) == BALANCED_ACHIEVER

    def test_all_high_hits_supportive_driver(self, classifier):
        assert classifier.classify((24, 24, 24, 24, 24)) == "The Supportive Driver"

    def test_all_low_falls_back(self, classifier):
        assert classifier.classify((8, 8, 8, 8, 8)) == BALANCED_ACHIEVER

    def test_first_match_wins(self, classifier):
        """Matches both Confident Avoider and Diplomatic Stabilizer; the earlier row wins."""
        vector = (24, 24, 8, 16, 8)
        assert ACHIEVER_RULES[0].matches(vector)
        assert ACHIEVER_RULES[8].matches(vector)
        assert classifier.classify(vector) == "The Confident Avoider"

    def test_technical_authority(self, classifier):
        assert classifier.classify((24, 8, 16, 24, 16)) == "The Technical Authority"

    def test_direct_implementer_before_technical_authority(self, classifier):
        assert classifier.classify((24, 8, 16, 24, 24)) == "The Direct Implementer"

    def test_boundary_values_inclusive(self, classifier):
        assert classifier.classify((14, 18, 14, 18, 14)) == BALANCED_ACHIEVER
        assert classifier.classify((19, 28, -28, 0, 13)) == "The Confident Avoider"

    def test_wrong_length_falls_back(self, classifier):
        assert classifier.classify((16, 16, 16)) == BALANCED_ACHIEVER

    def test_labels(self, classifier):
        labels = classifier.labels()
        assert len(labels) == 10
        assert labels[-1] == BALANCED_ACHIEVER

    def test_scores_beyond_short_form_range(self, classifier):
        """Seven questions per sub-section push dimensions to 84."""
        assert classifier.classify((84, 84, 84, 84, 84)) == "The Supportive Driver"
        assert classifier.classify((84, 84, -84, 16, -84)) == "The Confident Avoider"


class TestArchetypeTable:
    """Trait-composite table with "Profile Not Found" fallback."""

    @pytest.fixture
    def classifier(self):
        return get_classifier(ProfileTable.ARCHETYPE)

    def test_eight_rules(self):
        assert len(ARCHETYPE_RULES) == 8

    @pytest.mark.parametrize("trust, driver, adapt, label", [
        (24, 24, 8, "The Trusting Driven Flexible"),
        (24, 24, 24, "The Trusting Driven Precise"),
        (24, 8, 8, "The Trusting Reserved Flexible"),
        (24, 8, 24, "The Trusting Reserved Precise"),
        (8, 24, 8, "The Cautious Driven Flexible"),
        (8, 24, 24, "The Cautious Driven Precise"),
        (8, 8, 8, "The Cautious Reserved Flexible"),
        (8, 8, 24, "The Cautious Reserved Precise"),
    ])
    def test_composites(self, classifier, trust, driver, adapt, label):
        assert classifier.classify((0, trust, driver, adapt, 0)) == label

    def test_medium_trust_not_found(self, classifier):
        assert classifier.classify((16, 16, 16, 16, 16)) == PROFILE_NOT_FOUND

    def test_scores_beyond_short_form_range(self, classifier):
        assert classifier.classify((84, 84, 84, 84, 84)) == "The Trusting Driven Precise"
        assert classifier.classify((0, -84, -84, -84, 0)) == "The Cautious Reserved Flexible"

    def test_tables_not_merged(self, classifier):
        assert BALANCED_ACHIEVER not in classifier.labels()
        assert PROFILE_NOT_FOUND not in get_classifier(ProfileTable.ACHIEVER).labels()


class TestCustomRules:
    """ProfileClassifier over an ad-hoc table."""

    def test_any_is_unbounded(self):
        assert ProfileRule("open", (ANY,) * 5).matches((10**6, -10**6, 0, 84, -84))

    def test_high_and_low_open_ended(self):
        assert HIGH == (19, math.inf)
        assert LOW == (-math.inf, 13)
        assert MEDIUM == (14, 18)

    def test_empty_table_returns_fallback(self):
        classifier = ProfileClassifier(ProfileTable.ARCHETYPE, [], "none")
        assert classifier.classify((1, 2, 3, 4, 5)) == "none"

    def test_rule_order_matters(self):
        wide = ProfileRule("wide", ((-28, 28),) * 5)
        narrow = ProfileRule("narrow", ((0, 0),) * 5)
        assert ProfileClassifier(ProfileTable.ACHIEVER, [wide, narrow], "x").classify((0,) * 5) == "wide"
        assert ProfileClassifier(ProfileTable.ACHIEVER, [narrow, wide], "x").classify((0,) * 5) == "narrow"


class TestDescriptions:
    """Narratives for achiever labels."""

    def test_every_achiever_label_described(self):
        for label in get_classifier(ProfileTable.ACHIEVER).labels():
            assert label in PROFILE_DESCRIPTIONS
            assert len(PROFILE_DESCRIPTIONS[label].traits) == 5

    def test_unknown_label_placeholder(self):
        description = describe_profile("The Mystery Leader")
        assert description.summary == "Profile information not available"

    def test_none_label_placeholder(self):
        assert describe_profile(None).name == ""
