"""Export configuration model."""

from pydantic import BaseModel, Field, model_validator


class ExportConfig(BaseModel, frozen=True):
    question_key: str = Field(default="question", min_length=1)
    answer_key: str = Field(default="answer", min_length=1)
    include_title: bool = True

    @model_validator(mode="after")
    def _keys_are_distinct(self) -> "ExportConfig":
        reserved = {"id", "title"} if self.include_title else {"id"}
        if self.question_key == self.answer_key:
            raise ValueError("question_key and answer_key must differ")
        clashes = sorted(reserved & {self.question_key, self.answer_key})
        if clashes:
            raise ValueError(f"export keys clash with reserved keys: {clashes}")
        return self
