from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union


class IndividualScore(BaseModel):
    """
    One dimension scored for a single rater.
    """

    kind: Literal["individual"] = "individual"
    name: str = Field(..., description="Dimension display name")
    score: float = Field(..., description="Raw dimension score")
    normalized_score: Optional[float] = Field(
        default=None,
        description="Score on the 0-5 display scale (None for Coachability)"
    )
    category: str = Field(..., description="Band label for the raw score")
    min: int
    max: int
    color: str


class AggregateScore(BaseModel):
    """
    One dimension scored across the self rater and external raters.
    """

    kind: Literal["aggregate"] = "aggregate"
    name: str = Field(..., description="Dimension display name")
    self_score: Optional[float] = None
    rater1_score: Optional[float] = None
    rater2_score: Optional[float] = None
    others_score: Optional[float] = Field(
        default=None,
        description="Mean of eligible external raters"
    )
    avg_score: Optional[float] = Field(
        default=None,
        description="Mean of every available score, self included"
    )
    self_normalized: Optional[float] = None
    others_normalized: Optional[float] = None
    category: Optional[str] = Field(default=None, description="Band label for the self score")
    min: int
    max: int
    color: str


DimensionScore = Annotated[
    Union[IndividualScore, AggregateScore],
    Field(discriminator="kind"),
]


class AssessmentResults(BaseModel):
    """
    Full result record for a set of raters.
    """

    dimension_scores: List[DimensionScore] = Field(default_factory=list)
    self_awareness: float = Field(default=0.0, ge=0, le=100)
    coachability_awareness: float = Field(default=0.0, ge=0, le=100)
    profile_type: Optional[str] = None
    profile_table: str = Field(..., description="Classification table that produced profile_type")


class ProfileDescription(BaseModel):
    """
    Narrative shown next to a profile label.
    """

    name: str
    summary: str
    traits: List[str]
