"""
Health Check Router - Orbit Leadership Assessment
orbit/routers/health.py

Reports service status and the loaded question catalog.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from orbit.config import get_settings
from orbit.core.dependencies import get_assessment_repository, get_question_catalog
from orbit.repositories.assessment_repository import AssessmentRepository
from orbit.scoring.question_catalog import QuestionCatalog

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


#  Routes


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health",
)
async def health_check(
    catalog: QuestionCatalog = Depends(get_question_catalog),
    repo: AssessmentRepository = Depends(get_assessment_repository),
) -> HealthResponse:
    dependencies = {
        "question_catalog": (
            f"healthy ({catalog.version}, {len(catalog)} questions)"
            if len(catalog) else "unhealthy: empty catalog"
        ),
        "assessment_store": f"healthy ({repo.count()} assessments)",
    }
    overall = "healthy" if all(v.startswith("healthy") for v in dependencies.values()) else "degraded"

    return HealthResponse(
        status=overall,
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        dependencies=dependencies,
    )
