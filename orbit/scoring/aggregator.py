"""
scoring/aggregator.py

Combines per-rater dimension scores into the result record shown to users.

Modes:
    no raters    -> empty dimension list, metrics 0, no profile
    one rater    -> IndividualScore rows; profile only when that rater is SELF
    2+ raters    -> AggregateScore rows with self / rater1 / rater2 / mean

Formulas:
    normalized            = (raw + 28) / 56 × 5          (opposed dimensions only)
    coachability display  = raw_sum × 10 / coachability questions   (10-50 scale)
    self_awareness        = 100 × (1 − mean|self − others| / 56)    clamped [0, 100]
    coachability_aware    = 100 × (1 − |self − others| / 40)        clamped [0, 100]

External raters count only when completed and non-empty. Awareness metrics
are 0 unless a SELF rater and at least one eligible external rater exist.
"""

import structlog
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from orbit.models.assessment import RaterResponses
from orbit.models.enumerations import ProfileTable, RaterType, Section, SubSection
from orbit.models.results import AggregateScore, AssessmentResults, IndividualScore
from orbit.scoring.bands import (
    COACHABILITY_SPAN,
    DIMENSION_SPAN,
    DIMENSIONS,
    categorize,
    coachability_display,
    normalize_dimension,
)
from orbit.scoring.dimension_scorer import (
    OPPOSED_SECTIONS,
    DimensionScorer,
    RaterDimensionScores,
)
from orbit.scoring.profile_classifier import ProfileClassifier, get_classifier
from orbit.scoring.question_catalog import QuestionCatalog
from orbit.scoring.utils import clamp, mean, round2

logger = structlog.get_logger(__name__)

ROW_ORDER = OPPOSED_SECTIONS + (Section.COACHABILITY,)


class ResultsAggregator:
    """Compute the full result record for a list of raters."""

    def __init__(
        self,
        catalog: QuestionCatalog,
        classifier: Optional[ProfileClassifier] = None,
        scorer: Optional[DimensionScorer] = None,
    ):
        self.catalog = catalog
        self.classifier = classifier or get_classifier(ProfileTable.ACHIEVER)
        self.scorer = scorer or DimensionScorer()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _display_value(self, section: Section, scores: RaterDimensionScores) -> Decimal:
        """Raw score for opposed dimensions, 10-50 value for Coachability."""
        raw = Decimal(scores.for_section(section))
        if section == Section.COACHABILITY:
            return coachability_display(raw, self.catalog.count(SubSection.COACHABILITY))
        return raw

    @staticmethod
    def is_eligible(rater: RaterResponses) -> bool:
        """External raters count toward averages only once completed with answers."""
        return rater.completed and bool(rater.responses)

    def self_awareness(
        self,
        self_scores: RaterDimensionScores,
        external: Sequence[RaterDimensionScores],
    ) -> Decimal:
        if not external:
            return Decimal("0")
        deviations = []
        for section in OPPOSED_SECTIONS:
            others = mean([Decimal(s.for_section(section)) for s in external])
            deviations.append(abs(Decimal(self_scores.for_section(section)) - others))
        mad = mean(deviations)
        return clamp(Decimal("100") * (Decimal("1") - mad / Decimal(DIMENSION_SPAN)))

    def coachability_awareness(
        self,
        self_scores: RaterDimensionScores,
        external: Sequence[RaterDimensionScores],
    ) -> Decimal:
        if not external:
            return Decimal("0")
        self_c = self._display_value(Section.COACHABILITY, self_scores)
        others_c = mean([self._display_value(Section.COACHABILITY, s) for s in external])
        gap = abs(self_c - others_c)
        return clamp(Decimal("100") * (Decimal("1") - gap / Decimal(COACHABILITY_SPAN)))

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def _individual(self, rater: RaterResponses) -> AssessmentResults:
        scores = self.scorer.score(rater.responses, self.catalog)

        rows: List[IndividualScore] = []
        for section in ROW_ORDER:
            info = DIMENSIONS[section]
            value = self._display_value(section, scores)
            rows.append(
                IndividualScore(
                    name=info.name,
                    score=round2(value),
                    normalized_score=(
                        None if section == Section.COACHABILITY
                        else round2(normalize_dimension(value))
                    ),
                    category=categorize(section, float(value)),
                    min=info.min,
                    max=info.max,
                    color=info.color,
                )
            )

        profile = None
        if rater.rater_type == RaterType.SELF:
            profile = self.classifier.classify(scores.profile_vector())

        return AssessmentResults(
            dimension_scores=rows,
            self_awareness=0.0,
            coachability_awareness=0.0,
            profile_type=profile,
            profile_table=self.classifier.table.value,
        )

    def _aggregate(self, raters: Sequence[RaterResponses]) -> AssessmentResults:
        by_type: Dict[RaterType, RaterResponses] = {}
        for rater in raters:
            by_type.setdefault(rater.rater_type, rater)

        self_rater = by_type.get(RaterType.SELF)
        self_scores = (
            self.scorer.score(self_rater.responses, self.catalog) if self_rater else None
        )

        external: Dict[RaterType, RaterDimensionScores] = {}
        for rater_type in (RaterType.RATER1, RaterType.RATER2):
            rater = by_type.get(rater_type)
            if rater is not None and self.is_eligible(rater):
                external[rater_type] = self.scorer.score(rater.responses, self.catalog)

        rows: List[AggregateScore] = []
        for section in ROW_ORDER:
            info = DIMENSIONS[section]
            self_val = self._display_value(section, self_scores) if self_scores else None
            r1 = external.get(RaterType.RATER1)
            r2 = external.get(RaterType.RATER2)
            r1_val = self._display_value(section, r1) if r1 else None
            r2_val = self._display_value(section, r2) if r2 else None

            ext_vals = [v for v in (r1_val, r2_val) if v is not None]
            all_vals = [v for v in (self_val, r1_val, r2_val) if v is not None]
            others = mean(ext_vals) if ext_vals else None
            avg = mean(all_vals) if all_vals else None

            opposed = section != Section.COACHABILITY
            rows.append(
                AggregateScore(
                    name=info.name,
                    self_score=round2(self_val) if self_val is not None else None,
                    rater1_score=round2(r1_val) if r1_val is not None else None,
                    rater2_score=round2(r2_val) if r2_val is not None else None,
                    others_score=round2(others) if others is not None else None,
                    avg_score=round2(avg) if avg is not None else None,
                    self_normalized=(
                        round2(normalize_dimension(self_val))
                        if opposed and self_val is not None else None
                    ),
                    others_normalized=(
                        round2(normalize_dimension(others))
                        if opposed and others is not None else None
                    ),
                    category=categorize(section, float(self_val)) if self_val is not None else None,
                    min=info.min,
                    max=info.max,
                    color=info.color,
                )
            )

        self_aware = Decimal("0")
        coach_aware = Decimal("0")
        profile = None
        if self_scores is not None:
            ext_list = list(external.values())
            self_aware = self.self_awareness(self_scores, ext_list)
            coach_aware = self.coachability_awareness(self_scores, ext_list)
            profile = self.classifier.classify(self_scores.profile_vector())

        return AssessmentResults(
            dimension_scores=rows,
            self_awareness=round2(self_aware),
            coachability_awareness=round2(coach_aware),
            profile_type=profile,
            profile_table=self.classifier.table.value,
        )

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def calculate_all_results(self, raters: Optional[Sequence[RaterResponses]]) -> AssessmentResults:
        """
        Args:
            raters: 0-3 RaterResponses. Partial response sets are scored as-is.

        Returns:
            AssessmentResults. Never raises for missing or partial data.
        """
        raters = list(raters or [])

        if not raters:
            results = AssessmentResults(profile_table=self.classifier.table.value)
        elif len(raters) == 1:
            results = self._individual(raters[0])
        else:
            results = self._aggregate(raters)

        logger.info(
            "results_calculated",
            catalog_version=self.catalog.version,
            rater_count=len(raters),
            self_awareness=results.self_awareness,
            coachability_awareness=results.coachability_awareness,
            profile_type=results.profile_type,
        )
        return results


def calculate_all_results(
    raters: Optional[Sequence[RaterResponses]],
    catalog: QuestionCatalog,
    table: ProfileTable = ProfileTable.ACHIEVER,
) -> AssessmentResults:
    """Functional shortcut around ResultsAggregator."""
    return ResultsAggregator(catalog, get_classifier(table)).calculate_all_results(raters)
