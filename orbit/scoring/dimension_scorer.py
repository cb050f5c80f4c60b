# orbit/scoring/dimension_scorer.py
"""
Dimension Scorer
----------------
Turns one rater's raw 1-5 answers into one score per behavioral dimension
plus a Coachability score.

Opposed pairs (order as used throughout the product):
    Esteem              INSECURE  / PRIDE
    Trust               TRUSTING  / CAUTIOUS
    Business Drive      HUSTLE    / RESERVED
    Adaptability        FLEXIBLE  / PRECISE
    Problem Resolution  DIRECT    / AVOIDANT

Formula, per sub-section of a pair:
    max_possible = questions_in_sub_section × ITEM_CEILING
    adjusted     = max_possible − Σ raw answers
    dimension    = adjusted(A) + adjusted(B)

Coachability has no opposing pole:
    coachability = Σ raw answers (no adjustment)

ITEM_CEILING is 7 even though answers run 1-5; the value is kept as-is
and pinned by tests. isReversed / negativeScore flags are not read here.
Unknown question ids and unanswered questions contribute nothing.
"""
import structlog
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from orbit.models.assessment import AssessmentResponse
from orbit.models.enumerations import Section, SubSection
from orbit.scoring.question_catalog import QuestionCatalog

logger = structlog.get_logger(__name__)

ITEM_CEILING = 7

DIMENSION_PAIRS: Dict[Section, Tuple[SubSection, SubSection]] = {
    Section.ESTEEM:             (SubSection.INSECURE, SubSection.PRIDE),
    Section.TRUST:              (SubSection.TRUSTING, SubSection.CAUTIOUS),
    Section.DRIVER:             (SubSection.HUSTLE, SubSection.RESERVED),
    Section.ADAPTABILITY:       (SubSection.FLEXIBLE, SubSection.PRECISE),
    Section.PROBLEM_RESOLUTION: (SubSection.DIRECT, SubSection.AVOIDANT),
}

OPPOSED_SECTIONS: Tuple[Section, ...] = tuple(DIMENSION_PAIRS)


@dataclass(frozen=True)
class RaterDimensionScores:
    """Output of DimensionScorer.score()."""
    esteem: int
    trust: int
    driver: int
    adaptability: int
    problem_resolution: int
    coachability: int
    raw_sub_totals: Dict[SubSection, int]  # Σ raw answers per sub-section
    answered: int                          # responses that matched a catalog question

    def for_section(self, section: Section) -> int:
        return {
            Section.ESTEEM: self.esteem,
            Section.TRUST: self.trust,
            Section.DRIVER: self.driver,
            Section.ADAPTABILITY: self.adaptability,
            Section.PROBLEM_RESOLUTION: self.problem_resolution,
            Section.COACHABILITY: self.coachability,
        }[section]

    def profile_vector(self) -> Tuple[int, int, int, int, int]:
        """The five opposed dimension scores, in DIMENSION_PAIRS order."""
        return (
            self.esteem,
            self.trust,
            self.driver,
            self.adaptability,
            self.problem_resolution,
        )


class DimensionScorer:
    """Score one rater's answers against a question catalog."""

    def __init__(self, item_ceiling: int = ITEM_CEILING):
        self.item_ceiling = item_ceiling

    def sub_section_totals(
        self,
        responses: Iterable[AssessmentResponse],
        catalog: QuestionCatalog,
    ) -> Tuple[Dict[SubSection, int], int]:
        """Σ raw answers per sub-section, plus the number of answers that matched."""
        totals: Dict[SubSection, int] = {sub: 0 for sub in SubSection}
        answered = 0
        for response in responses:
            question = catalog.by_id(response.question_id)
            if question is None:
                continue
            totals[question.sub_section] += response.score
            answered += 1
        return totals, answered

    def adjusted_sub_score(
        self,
        sub_section: SubSection,
        raw_total: int,
        catalog: QuestionCatalog,
    ) -> int:
        """max_possible − raw_total for one sub-section."""
        max_possible = catalog.count(sub_section) * self.item_ceiling
        return max_possible - raw_total

    def score(
        self,
        responses: Iterable[AssessmentResponse],
        catalog: QuestionCatalog,
    ) -> RaterDimensionScores:
        """
        Args:
            responses: One rater's answers. Partial sets are scored as-is.
            catalog: Question snapshot that resolves ids to sub-sections.

        Returns:
            RaterDimensionScores with one integer per dimension.

        Examples:
            >>> # Insecure answered 5, 5 and Pride answered 1, 1 (2 questions each)
            >>> # adjusted Insecure = 14 − 10 = 4, adjusted Pride = 14 − 2 = 12
            >>> DimensionScorer().score(responses, DEFAULT_CATALOG).esteem
            16
        """
        totals, answered = self.sub_section_totals(responses, catalog)

        dims: Dict[Section, int] = {}
        for section, (sub_a, sub_b) in DIMENSION_PAIRS.items():
            dims[section] = (
                self.adjusted_sub_score(sub_a, totals[sub_a], catalog)
                + self.adjusted_sub_score(sub_b, totals[sub_b], catalog)
            )

        coachability = totals[SubSection.COACHABILITY]

        logger.debug(
            "dimension_scores_calculated",
            catalog_version=catalog.version,
            answered=answered,
            esteem=dims[Section.ESTEEM],
            trust=dims[Section.TRUST],
            driver=dims[Section.DRIVER],
            adaptability=dims[Section.ADAPTABILITY],
            problem_resolution=dims[Section.PROBLEM_RESOLUTION],
            coachability=coachability,
        )

        return RaterDimensionScores(
            esteem=dims[Section.ESTEEM],
            trust=dims[Section.TRUST],
            driver=dims[Section.DRIVER],
            adaptability=dims[Section.ADAPTABILITY],
            problem_resolution=dims[Section.PROBLEM_RESOLUTION],
            coachability=coachability,
            raw_sub_totals=totals,
            answered=answered,
        )
