"""
Results Router - Orbit Leadership Assessment
orbit/routers/results.py

Stateless scoring: callers post rater response sets and get the full
result record back. Nothing is stored.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from orbit.core.dependencies import get_question_catalog, get_results_aggregator
from orbit.models.assessment import ErrorResponse, RaterResponses
from orbit.models.enumerations import ProfileTable
from orbit.models.results import AssessmentResults
from orbit.scoring.aggregator import ResultsAggregator
from orbit.scoring.profile_classifier import get_classifier
from orbit.scoring.question_catalog import QuestionCatalog

router = APIRouter(prefix="/results", tags=["Results"])


class CalculateRequest(BaseModel):
    raters: List[RaterResponses] = Field(default_factory=list, max_length=3)


@router.post(
    "/calculate",
    response_model=AssessmentResults,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
    summary="Score a set of raters",
    description="Individual mode for one rater, aggregate mode for two or more.",
)
async def calculate_results(
    payload: CalculateRequest,
    table: Optional[ProfileTable] = Query(default=None, description="Override the configured profile table"),
    aggregator: ResultsAggregator = Depends(get_results_aggregator),
    catalog: QuestionCatalog = Depends(get_question_catalog),
) -> AssessmentResults:
    if table is not None and table != aggregator.classifier.table:
        aggregator = ResultsAggregator(catalog, get_classifier(table))
    return aggregator.calculate_all_results(payload.raters)
