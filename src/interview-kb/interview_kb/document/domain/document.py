"""KnowledgeDocument — the ordered, immutable Q&A content store."""

from collections import Counter

from pydantic import BaseModel, Field

from interview_kb.document.domain.errors import EntryNotFoundError
from interview_kb.document.domain.parsed import UnnumberedHeading
from interview_kb.entry.domain.code_block import CodeBlock
from interview_kb.entry.domain.entry import Entry


class KnowledgeDocument(BaseModel, frozen=True):
    """Immutable value object returned by a DocumentLoader.

    Carries the entries in source order together with the SHA-256 hex digest
    of the raw file bytes, so callers can record which exact revision of the
    document they used.
    """

    source: str = Field(min_length=1)
    sha256: str = Field(min_length=1)
    preamble: str = ""
    preamble_code_blocks: list[CodeBlock] = Field(default_factory=list)
    entries: list[Entry]
    unnumbered_headings: list[UnnumberedHeading] = Field(default_factory=list)

    @property
    def numbers(self) -> list[int]:
        return [entry.number for entry in self.entries]

    def entry(self, number: int) -> Entry:
        """Return the first entry with the given number.

        Raises:
            EntryNotFoundError: if no entry carries that number.
        """
        for candidate in self.entries:
            if candidate.number == number:
                return candidate
        raise EntryNotFoundError(number=number)

    def search(self, term: str) -> list[Entry]:
        """Return entries whose title, question or answer contain term."""
        if not term.strip():
            raise ValueError("search term must not be blank")
        return [entry for entry in self.entries if entry.matches(term.strip())]

    def with_language(self, language: str) -> list[Entry]:
        """Return entries with at least one code block tagged with language."""
        wanted = language.strip().lower()
        if not wanted:
            raise ValueError("language must not be blank")
        return [entry for entry in self.entries if wanted in entry.languages]

    def language_counts(self) -> dict[str, int]:
        """Count code blocks per language tag; untagged blocks count under ''."""
        counts = Counter(
            block.language
            for entry in self.entries
            for block in entry.code_blocks
        )
        return dict(sorted(counts.items()))
