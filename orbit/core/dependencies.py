"""
Dependencies - Orbit Leadership Assessment
orbit/core/dependencies.py

FastAPI dependency injection for the catalog, scoring engine and services.
"""

from functools import lru_cache

from orbit.config import get_settings
from orbit.models.enumerations import ProfileTable
from orbit.repositories.assessment_repository import AssessmentRepository
from orbit.scoring.aggregator import ResultsAggregator
from orbit.scoring.profile_classifier import get_classifier
from orbit.scoring.question_catalog import BUILT_IN_CATALOGS, QuestionCatalog, load_catalog_file
from orbit.services.assessment_service import AssessmentService


@lru_cache()
def get_question_catalog() -> QuestionCatalog:
    """Get the configured catalog snapshot (JSON file or built-in)."""
    settings = get_settings()
    if settings.QUESTION_CATALOG_PATH:
        return load_catalog_file(settings.QUESTION_CATALOG_PATH)
    return BUILT_IN_CATALOGS[settings.QUESTION_CATALOG]


@lru_cache()
def get_results_aggregator() -> ResultsAggregator:
    """Get cached ResultsAggregator bound to the configured profile table."""
    table = ProfileTable(get_settings().PROFILE_TABLE)
    return ResultsAggregator(get_question_catalog(), get_classifier(table))


@lru_cache()
def get_assessment_repository() -> AssessmentRepository:
    """Get cached AssessmentRepository instance."""
    return AssessmentRepository()


@lru_cache()
def get_assessment_service() -> AssessmentService:
    """Get cached AssessmentService instance."""
    return AssessmentService(
        repository=get_assessment_repository(),
        catalog=get_question_catalog(),
        aggregator=get_results_aggregator(),
        code_length=get_settings().ASSESSMENT_CODE_LENGTH,
    )
