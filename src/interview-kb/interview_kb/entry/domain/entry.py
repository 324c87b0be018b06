"""Entry domain value object — one numbered question/answer unit."""

from pydantic import BaseModel, Field

from interview_kb.entry.domain.code_block import CodeBlock


class Entry(BaseModel, frozen=True):
    """Immutable value object representing a single numbered Q&A entry.

    ``answer`` is the verbatim answer body, prose and fences included.
    ``preface`` holds any text between the heading and the question marker.
    ``line`` is the 1-based line of the entry heading in the source document.
    """

    number: int = Field(ge=1)
    title: str
    preface: str = ""
    question: str
    answer: str
    line: int = Field(ge=1)
    code_blocks: list[CodeBlock] = Field(default_factory=list)

    @property
    def languages(self) -> list[str]:
        """Distinct code block languages in order of first appearance."""
        seen: list[str] = []
        for block in self.code_blocks:
            if block.language and block.language not in seen:
                seen.append(block.language)
        return seen

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over title, question and answer."""
        needle = term.casefold()
        return any(
            needle in text.casefold()
            for text in (self.title, self.question, self.answer)
        )
