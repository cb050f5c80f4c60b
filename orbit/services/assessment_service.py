"""
Assessment Service - Orbit Leadership Assessment
orbit/services/assessment_service.py

Applies the assessment lifecycle rules on top of the repository:

  start_assessment  -> new assessment + SELF rater, shareable code
  join_as_rater     -> next free slot (rater1, then rater2); same email rejoins
  record_response   -> 1-5 answer to a known question, overwriting any earlier one
  complete_rater    -> only once every catalog question is answered; never reverts
  get_results       -> scoring engine over the stored raters
"""

import logging
import secrets
import string
from typing import List, Optional

from orbit.core.exceptions import (
    AssessmentStateException,
    DuplicateEntityException,
    EntityNotFoundException,
)
from orbit.models.assessment import Assessment, AssessmentResponse, RaterResponses
from orbit.models.enumerations import RaterType
from orbit.models.results import AssessmentResults
from orbit.repositories.assessment_repository import AssessmentRepository
from orbit.scoring.aggregator import ResultsAggregator
from orbit.scoring.question_catalog import QuestionCatalog

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
MAX_CODE_ATTEMPTS = 20
EXTERNAL_SLOTS = (RaterType.RATER1, RaterType.RATER2)


class AssessmentService:
    """Assessment lifecycle operations."""

    def __init__(
        self,
        repository: AssessmentRepository,
        catalog: QuestionCatalog,
        aggregator: ResultsAggregator,
        code_length: int = 6,
    ):
        self.repository = repository
        self.catalog = catalog
        self.aggregator = aggregator
        self.code_length = code_length

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _generate_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = "".join(secrets.choice(CODE_ALPHABET) for _ in range(self.code_length))
            if not self.repository.code_exists(code):
                return code
        raise DuplicateEntityException("Could not allocate a unique assessment code")

    def get_assessment(self, code: str) -> Assessment:
        assessment = self.repository.get_by_code(code)
        if assessment is None:
            raise EntityNotFoundException("Assessment", code)
        return assessment

    @staticmethod
    def _get_rater(assessment: Assessment, rater_type: RaterType) -> RaterResponses:
        rater = assessment.get_rater(rater_type)
        if rater is None:
            raise EntityNotFoundException("Rater", f"{assessment.code}/{rater_type.value}")
        return rater

    def missing_questions(self, rater: RaterResponses) -> List[str]:
        """Catalog question ids the rater has not answered yet."""
        answered = {r.question_id for r in rater.responses}
        return [q.id for q in self.catalog.questions if q.id not in answered]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_assessment(self, email: str, name: str) -> Assessment:
        assessment = Assessment(
            code=self._generate_code(),
            self_rater_email=email,
            self_rater_name=name,
            raters=[RaterResponses(rater_type=RaterType.SELF, email=email, name=name)],
        )
        created = self.repository.create(assessment)
        logger.info(f"Started assessment {created.code} for {email}")
        return created

    def join_as_rater(self, code: str, email: str, name: str) -> RaterType:
        """
        Attach an external rater to an assessment.

        Returns:
            The slot assigned to the rater.

        Raises:
            EntityNotFoundException: unknown code.
            AssessmentStateException: the self rater tried to rate themselves.
            DuplicateEntityException: both external slots are taken.
        """
        assessment = self.get_assessment(code)
        email_key = email.strip().lower()

        if assessment.self_rater_email.strip().lower() == email_key:
            raise AssessmentStateException("The self rater cannot join as an external rater")

        for rater in assessment.raters:
            if rater.rater_type != RaterType.SELF and rater.email.strip().lower() == email_key:
                return rater.rater_type

        for slot in EXTERNAL_SLOTS:
            if assessment.get_rater(slot) is None:
                return self.add_rater(code, email, name, slot)

        raise DuplicateEntityException(f"Assessment {assessment.code} already has two external raters")

    def add_rater(self, code: str, email: str, name: str, rater_type: RaterType) -> RaterType:
        """Place an external rater in a specific slot."""
        if rater_type == RaterType.SELF:
            raise AssessmentStateException("The self rater is created with the assessment")

        assessment = self.get_assessment(code)
        if assessment.get_rater(rater_type) is not None:
            raise DuplicateEntityException(f"Slot {rater_type.value} is already taken")

        assessment.raters.append(RaterResponses(rater_type=rater_type, email=email, name=name))
        self.repository.update(assessment)
        logger.info(f"Rater {email} joined assessment {assessment.code} as {rater_type.value}")
        return rater_type

    def record_response(
        self,
        code: str,
        rater_type: RaterType,
        question_id: str,
        score: int,
    ) -> RaterResponses:
        """
        Store or overwrite one answer.

        Raises:
            EntityNotFoundException: unknown assessment, rater or question.
            AssessmentStateException: the rater already completed.
            ValueError: score outside 1-5 (pydantic validation).
        """
        if self.catalog.by_id(question_id) is None:
            raise EntityNotFoundException("Question", question_id)

        response = AssessmentResponse(question_id=question_id, score=score)
        assessment = self.get_assessment(code)
        rater = self._get_rater(assessment, rater_type)

        if rater.completed:
            raise AssessmentStateException(f"Rater {rater_type.value} has already completed")

        rater.responses = [r for r in rater.responses if r.question_id != question_id]
        rater.responses.append(response)
        self.repository.update(assessment)
        return rater

    def complete_rater(self, code: str, rater_type: RaterType) -> Assessment:
        """
        Mark a rater as completed. Idempotent once completed.

        The assessment completes once every rater has; later joins keep it completed.

        Raises:
            AssessmentStateException: questions are still unanswered.
        """
        assessment = self.get_assessment(code)
        rater = self._get_rater(assessment, rater_type)

        if rater.completed:
            return assessment

        missing = self.missing_questions(rater)
        if missing:
            raise AssessmentStateException(
                f"Rater {rater_type.value} has {len(missing)} unanswered question(s)"
            )

        rater.completed = True
        assessment.completed = assessment.completed or all(r.completed for r in assessment.raters)
        updated = self.repository.update(assessment)
        logger.info(
            f"Rater {rater_type.value} completed assessment {assessment.code} "
            f"(assessment completed={updated.completed})"
        )
        return updated

    def get_results(self, code: str) -> AssessmentResults:
        assessment = self.get_assessment(code)
        return self.aggregator.calculate_all_results(assessment.raters)

    def find(self, search: Optional[str] = None) -> List[Assessment]:
        """List assessments, optionally filtered by self-rater name or email."""
        items = self.repository.list_all()
        if not search:
            return items
        term = search.lower()
        return [
            a for a in items
            if term in a.self_rater_email.lower() or term in a.self_rater_name.lower()
        ]
