"""
Question Catalog Router - Orbit Leadership Assessment
orbit/routers/questions.py

Endpoints:
  GET /api/v1/questions                 - Catalog, optionally filtered
  GET /api/v1/questions/export          - Admin JSON export
  GET /api/v1/questions/{question_id}   - One question
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from pydantic import BaseModel

from orbit.core.dependencies import get_question_catalog
from orbit.models.assessment import ErrorResponse
from orbit.models.enumerations import Section, SubSection
from orbit.models.question import Question
from orbit.routers.assessments import raise_not_found
from orbit.scoring.question_catalog import QuestionCatalog, export_catalog_json

router = APIRouter(prefix="/questions", tags=["Questions"])


class QuestionListResponse(BaseModel):
    version: str
    total: int
    items: List[Question]


@router.get(
    "",
    response_model=QuestionListResponse,
    summary="List catalog questions",
)
async def list_questions(
    section: Optional[Section] = Query(default=None),
    sub_section: Optional[SubSection] = Query(default=None),
    catalog: QuestionCatalog = Depends(get_question_catalog),
) -> QuestionListResponse:
    items = catalog.all_questions()
    if section is not None:
        items = [q for q in items if q.section == section]
    if sub_section is not None:
        items = [q for q in items if q.sub_section == sub_section]
    return QuestionListResponse(version=catalog.version, total=len(items), items=items)


# NOTE: defined before /{question_id} so "export" is not captured as an id
@router.get(
    "/export",
    summary="Export the catalog as admin JSON",
    response_class=Response,
)
async def export_questions(
    catalog: QuestionCatalog = Depends(get_question_catalog),
) -> Response:
    return Response(
        content=export_catalog_json(catalog),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="questions-{catalog.version}.json"'},
    )


@router.get(
    "/{question_id}",
    response_model=Question,
    responses={404: {"model": ErrorResponse, "description": "Question not found"}},
    summary="Get one question",
)
async def get_question(
    question_id: str,
    catalog: QuestionCatalog = Depends(get_question_catalog),
) -> Question:
    question = catalog.by_id(question_id)
    if question is None:
        raise_not_found("QUESTION_NOT_FOUND", f"Question {question_id} not found")
    return question
