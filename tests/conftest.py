# tests/conftest.py

"""
Pytest Fixtures - Shared catalog, rater and client fixtures

BUILT-IN CATALOG REFERENCE (core-24):
- 2 questions per opposed sub-section, max possible per sub-section = 2 × 7 = 14
- 4 Coachability questions, raw sum in [4, 20], display value raw × 2.5
- Answering every question with s gives dimension = 28 − 4s and coachability = 4s
    s=1 -> 24 (HIGH)   s=3 -> 16 (MEDIUM)   s=5 -> 8 (LOW)
"""

import pytest
from typing import Dict, List, Optional
from fastapi.testclient import TestClient

from orbit.main import app
from orbit.models.assessment import AssessmentResponse, RaterResponses
from orbit.models.enumerations import RaterType, SubSection
from orbit.repositories.assessment_repository import AssessmentRepository
from orbit.scoring.aggregator import ResultsAggregator
from orbit.scoring.question_catalog import DEFAULT_CATALOG, QuestionCatalog
from orbit.services.assessment_service import AssessmentService


# =============================================================================
# HELPERS
# =============================================================================

def answer_all(
    catalog: QuestionCatalog,
    score: int,
    overrides: Optional[Dict[SubSection, int]] = None,
) -> List[AssessmentResponse]:
    """Answer every catalog question with `score`, per-sub-section overrides win."""
    overrides = overrides or {}
    return [
        AssessmentResponse(question_id=q.id, score=overrides.get(q.sub_section, score))
        for q in catalog.questions
    ]


def make_rater(
    rater_type: RaterType,
    score: int,
    completed: bool = True,
    overrides: Optional[Dict[SubSection, int]] = None,
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> RaterResponses:
    return RaterResponses(
        rater_type=rater_type,
        email=f"{rater_type.value}@acme.io",
        name=rater_type.value.title(),
        responses=answer_all(catalog, score, overrides),
        completed=completed,
    )


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# CATALOG / ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def catalog():
    """Built-in 24-question catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def aggregator(catalog):
    """Aggregator on the canonical achiever table."""
    return ResultsAggregator(catalog)


@pytest.fixture
def service(catalog, aggregator):
    """AssessmentService over a fresh in-memory repository."""
    return AssessmentService(
        repository=AssessmentRepository(),
        catalog=catalog,
        aggregator=aggregator,
    )


# =============================================================================
# RATER FIXTURES
# =============================================================================

@pytest.fixture
def self_balanced():
    """Self rater answering 3 everywhere: every dimension 16 (MEDIUM)."""
    return make_rater(RaterType.SELF, 3)


@pytest.fixture
def self_high():
    """Self rater answering 1 everywhere: every dimension 24 (HIGH)."""
    return make_rater(RaterType.SELF, 1)


@pytest.fixture
def rater1_low():
    """Completed external rater answering 5 everywhere: every dimension 8."""
    return make_rater(RaterType.RATER1, 5)


@pytest.fixture
def rater2_high():
    """Completed external rater answering 1 everywhere: every dimension 24."""
    return make_rater(RaterType.RATER2, 1)


# =============================================================================
# API PAYLOAD FIXTURES
# =============================================================================

@pytest.fixture
def valid_assessment_data():
    return {"email": "leader@acme.io", "name": "Jordan Leader"}


@pytest.fixture
def invalid_assessment_bad_email():
    return {"email": "not-an-email", "name": "Jordan Leader"}


@pytest.fixture
def invalid_assessment_empty_name():
    return {"email": "leader@acme.io", "name": ""}
