"""Integrity check configuration model."""

from pydantic import BaseModel, Field, field_validator


class IntegrityConfig(BaseModel, frozen=True):
    """Settings for the document integrity checks.

    ``expected_entry_count`` guards against accidental truncation; leave it
    unset to skip the count check. ``allowed_code_languages`` is stored in
    lower case.
    """

    expected_entry_count: int | None = Field(default=None, ge=1)
    require_code_language: bool = True
    allowed_code_languages: list[str] | None = None

    @field_validator("allowed_code_languages")
    @classmethod
    def _normalise_languages(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [language.strip().lower() for language in value if language.strip()]
