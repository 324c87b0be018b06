"""CodeBlock value object — one fenced code block inside an answer."""

from pydantic import BaseModel, Field, field_validator


class CodeBlock(BaseModel, frozen=True):
    """A fenced code block as it appears in the document.

    ``language`` is the first word of the fence info string in lower case, or
    an empty string for an untagged fence. ``closed`` is False when the
    document ends before a matching closing fence.
    """

    language: str
    content: str
    line: int = Field(ge=1)
    closed: bool = True

    @field_validator("language")
    @classmethod
    def _normalise_language(cls, value: str) -> str:
        return value.strip().lower()
