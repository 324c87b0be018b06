"""ParsedDocument — the structural result of parsing Markdown text."""

from pydantic import BaseModel, Field

from interview_kb.entry.domain.code_block import CodeBlock
from interview_kb.entry.domain.entry import Entry


class UnnumberedHeading(BaseModel, frozen=True):
    """A heading at entry level that carries no entry number."""

    text: str
    line: int = Field(ge=1)


class ParsedDocument(BaseModel, frozen=True):
    preamble: str
    preamble_code_blocks: list[CodeBlock] = Field(default_factory=list)
    entries: list[Entry]
    unnumbered_headings: list[UnnumberedHeading] = Field(default_factory=list)
