from pydantic import BaseModel, ConfigDict, Field

from orbit.models.enumerations import Section, SubSection


class Question(BaseModel):
    """
    One catalog question.

    `is_reversed` and `negative_score` are carried for the admin export
    and API consumers; scoring does not read them.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, max_length=32, description="Unique question identifier")
    text: str = Field(..., min_length=1, description="Question shown to the rater")
    section: Section = Field(..., description="Dimension the question belongs to")
    sub_section: SubSection = Field(..., description="Pole of the dimension")
    is_reversed: bool = False
    negative_score: bool = False
