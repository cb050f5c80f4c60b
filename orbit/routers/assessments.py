"""
Assessment Router - Orbit Leadership Assessment
orbit/routers/assessments.py

Assessment lifecycle endpoints plus the shared error envelope helpers and
request-validation handler used by every router.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from orbit.core.dependencies import get_assessment_service
from orbit.core.exceptions import (
    AssessmentStateException,
    DuplicateEntityException,
    EntityNotFoundException,
)
from orbit.models.assessment import (
    Assessment,
    AssessmentCreate,
    ErrorResponse,
    RaterJoin,
    RaterResponses,
)
from orbit.models.enumerations import RaterType
from orbit.models.results import AssessmentResults
from orbit.services.assessment_service import AssessmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessments", tags=["Assessments"])


#  Custom Exception Handlers 
# Registered in main.py: app.add_exception_handler(RequestValidationError, validation_exception_handler)

FIELD_MESSAGES = {
    "email": {
        "missing": "Email is required",
        "value_error": "Email must be a valid email address",
    },
    "name": {
        "missing": "Name is required",
        "string_too_short": "Name must not be empty",
        "string_too_long": "Name must not exceed 255 characters",
    },
    "score": {
        "missing": "Score is required",
        "greater_than_equal": "Score must be between 1 and 5",
        "less_than_equal": "Score must be between 1 and 5",
        "int_parsing": "Score must be a whole number",
    },
    "question_id": {
        "missing": "Question ID is required",
    },
    "rater_type": {
        "enum": "Rater type must be one of: self, rater1, rater2",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "string_type": "Field '{field}' must be a string",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "enum": "Field '{field}' has an invalid value",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def get_validation_message(field: str, error_type: str) -> str:
    leaf = field.split(".")[-1] if field else field
    if leaf in FIELD_MESSAGES:
        field_msgs = FIELD_MESSAGES[leaf]
        for key in field_msgs:
            if key in error_type:
                return field_msgs[key]

    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)

    return f"Invalid value for field '{field}'"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])

    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error_code": "INVALID_REQUEST",
                "message": "Malformed JSON request body",
                "details": None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    field = ".".join(str(l) for l in loc if l not in ("body", "path", "query"))
    message = get_validation_message(field, error_type)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": message,
            "details": {"field": field, "type": error_type} if field else None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


#  Exception Helpers 

def raise_error(status_code: int, error_code: str, message: str):
    raise HTTPException(
        status_code=status_code,
        detail=ErrorResponse(
            error_code=error_code,
            message=message,
            timestamp=datetime.now(timezone.utc)
        ).model_dump(mode="json")
    )


def raise_not_found(error_code: str, msg: str):
    raise_error(status.HTTP_404_NOT_FOUND, error_code, msg)


def raise_conflict(msg: str):
    raise_error(status.HTTP_409_CONFLICT, "CONFLICT", msg)


def raise_validation_error(msg: str):
    raise_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", msg)


def raise_for_service_error(exc: Exception):
    """Translate service exceptions into the error envelope."""
    if isinstance(exc, EntityNotFoundException):
        raise_not_found(f"{exc.entity_type.upper()}_NOT_FOUND", f"{exc.entity_type} not found")
    if isinstance(exc, DuplicateEntityException):
        raise_conflict(exc.message)
    if isinstance(exc, AssessmentStateException):
        raise_validation_error(exc.message)
    raise exc


#  Schemas 

class ResponseUpdate(BaseModel):
    """Body for recording one answer."""
    question_id: str = Field(..., min_length=1)
    score: int = Field(..., ge=1, le=5)


class RaterJoinResponse(BaseModel):
    code: str
    rater_type: RaterType


class RaterProgress(BaseModel):
    rater_type: RaterType
    answered: int
    total: int
    completed: bool


class AssessmentListResponse(BaseModel):
    items: List[Assessment]
    total: int


#  Routes 

@router.post(
    "",
    response_model=Assessment,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
    summary="Start a self-assessment",
    description="Creates an assessment with a shareable code and a self rater.",
)
async def start_assessment(
    payload: AssessmentCreate,
    service: AssessmentService = Depends(get_assessment_service),
) -> Assessment:
    return service.start_assessment(email=str(payload.email), name=payload.name)


@router.get(
    "",
    response_model=AssessmentListResponse,
    summary="List assessments",
    description="Newest first; optional search over self-rater name and email.",
)
async def list_assessments(
    search: Optional[str] = Query(default=None, max_length=255),
    service: AssessmentService = Depends(get_assessment_service),
) -> AssessmentListResponse:
    items = service.find(search)
    return AssessmentListResponse(items=items, total=len(items))


@router.get(
    "/{code}",
    response_model=Assessment,
    responses={404: {"model": ErrorResponse, "description": "Assessment not found"}},
    summary="Get an assessment by code",
)
async def get_assessment(
    code: str,
    service: AssessmentService = Depends(get_assessment_service),
) -> Assessment:
    try:
        return service.get_assessment(code)
    except EntityNotFoundException as e:
        raise_for_service_error(e)


@router.post(
    "/{code}/raters",
    response_model=RaterJoinResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse, "description": "Assessment not found"},
        409: {"model": ErrorResponse, "description": "Both rater slots are taken"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
    summary="Join an assessment as an external rater",
)
async def join_assessment(
    code: str,
    payload: RaterJoin,
    service: AssessmentService = Depends(get_assessment_service),
) -> RaterJoinResponse:
    try:
        rater_type = service.join_as_rater(code, str(payload.email), payload.name)
    except (EntityNotFoundException, DuplicateEntityException, AssessmentStateException) as e:
        raise_for_service_error(e)
    return RaterJoinResponse(code=code.upper(), rater_type=rater_type)


@router.put(
    "/{code}/raters/{rater_type}/responses",
    response_model=RaterProgress,
    responses={
        404: {"model": ErrorResponse, "description": "Assessment, rater or question not found"},
        422: {"model": ErrorResponse, "description": "Validation error or rater already completed"},
    },
    summary="Record or overwrite one answer",
)
async def record_response(
    code: str,
    rater_type: RaterType,
    payload: ResponseUpdate,
    service: AssessmentService = Depends(get_assessment_service),
) -> RaterProgress:
    try:
        rater = service.record_response(code, rater_type, payload.question_id, payload.score)
    except (EntityNotFoundException, AssessmentStateException) as e:
        raise_for_service_error(e)
    return _progress(service, rater)


@router.post(
    "/{code}/raters/{rater_type}/complete",
    response_model=Assessment,
    responses={
        404: {"model": ErrorResponse, "description": "Assessment or rater not found"},
        422: {"model": ErrorResponse, "description": "Unanswered questions remain"},
    },
    summary="Mark a rater as completed",
)
async def complete_rater(
    code: str,
    rater_type: RaterType,
    service: AssessmentService = Depends(get_assessment_service),
) -> Assessment:
    try:
        return service.complete_rater(code, rater_type)
    except (EntityNotFoundException, AssessmentStateException) as e:
        raise_for_service_error(e)


@router.get(
    "/{code}/results",
    response_model=AssessmentResults,
    responses={404: {"model": ErrorResponse, "description": "Assessment not found"}},
    summary="Calculate results for an assessment",
)
async def get_results(
    code: str,
    service: AssessmentService = Depends(get_assessment_service),
) -> AssessmentResults:
    try:
        return service.get_results(code)
    except EntityNotFoundException as e:
        raise_for_service_error(e)


def _progress(service: AssessmentService, rater: RaterResponses) -> RaterProgress:
    total = len(service.catalog)
    return RaterProgress(
        rater_type=rater.rater_type,
        answered=total - len(service.missing_questions(rater)),
        total=total,
        completed=rater.completed,
    )
