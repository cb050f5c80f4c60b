from pydantic import BaseModel, EmailStr, Field, model_validator
from datetime import datetime, timezone
from typing import Optional, List
from uuid import UUID, uuid4

from orbit.models.enumerations import RaterType


class AssessmentResponse(BaseModel):
    """
    One answer to one question by one rater.
    """

    question_id: str = Field(
        ...,
        min_length=1,
        description="Identifier of the answered question"
    )

    score: int = Field(
        ...,
        ge=1,
        le=5,
        description="Answer on the 1-5 agreement scale"
    )


class RaterResponses(BaseModel):
    """
    All answers given by one rater for one assessment.
    """

    rater_type: RaterType = Field(
        ...,
        description="Who is answering (self, rater1, rater2)"
    )

    email: str = Field(
        default="",
        max_length=255,
        description="Rater email address"
    )

    name: str = Field(
        default="",
        max_length=255,
        description="Rater display name"
    )

    responses: List[AssessmentResponse] = Field(
        default_factory=list,
        description="Answers, at most one per question"
    )

    completed: bool = Field(
        default=False,
        description="Set once every catalog question has an answer"
    )

    @model_validator(mode="after")
    def validate_unique_questions(self):
        """Ensure each question is answered at most once."""
        seen = set()
        for response in self.responses:
            if response.question_id in seen:
                raise ValueError(f"Duplicate response for question {response.question_id}")
            seen.add(response.question_id)
        return self


class Assessment(BaseModel):
    """
    A self-assessment and the external ratings attached to it.
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique assessment identifier"
    )

    code: str = Field(
        ...,
        min_length=4,
        max_length=12,
        description="Human-shareable join code"
    )

    self_rater_email: str = Field(..., max_length=255)

    self_rater_name: str = Field(..., max_length=255)

    raters: List[RaterResponses] = Field(
        default_factory=list,
        max_length=3,
        description="Self rater first, then up to two external raters"
    )

    completed: bool = False

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Record creation timestamp (UTC)"
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)"
    )

    @model_validator(mode="after")
    def validate_rater_slots(self):
        """Ensure one rater per slot with the self rater first."""
        types = [r.rater_type for r in self.raters]
        if len(types) != len(set(types)):
            raise ValueError("Each rater type may appear only once")
        if types and types[0] != RaterType.SELF:
            raise ValueError("The self rater must be listed first")
        return self

    def get_rater(self, rater_type: RaterType) -> Optional[RaterResponses]:
        for rater in self.raters:
            if rater.rater_type == rater_type:
                return rater
        return None


class AssessmentCreate(BaseModel):
    """
    Request body for starting a self-assessment.
    """

    email: EmailStr = Field(..., description="Self rater email")
    name: str = Field(..., min_length=1, max_length=255, description="Self rater name")


class RaterJoin(BaseModel):
    """
    Request body for an external rater joining by code.
    """

    email: EmailStr = Field(..., description="External rater email")
    name: str = Field(..., min_length=1, max_length=255, description="External rater name")


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error occurrence timestamp")
