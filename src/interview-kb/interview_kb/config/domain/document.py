"""Document layout configuration model."""

from pydantic import BaseModel, Field


class DocumentConfig(BaseModel, frozen=True):
    heading_level: int = Field(default=3, ge=1, le=6)
    question_marker: str = Field(default="Question", min_length=1)
    answer_marker: str = Field(default="Answer", min_length=1)
