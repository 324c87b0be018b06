"""Canonical Markdown rendering of a KnowledgeDocument."""

from interview_kb.config.domain.document import DocumentConfig
from interview_kb.document.domain.document import KnowledgeDocument
from interview_kb.entry.domain.entry import Entry

_SEPARATOR = "---"


def render_entry(entry: Entry, config: DocumentConfig) -> str:
    """Render one entry in the numbered heading / Question / Answer layout."""
    hashes = "#" * config.heading_level
    parts = [f"{hashes} **{entry.number}. {entry.title}**"]
    if entry.preface:
        parts.append(entry.preface)
    parts.append(f"**{config.question_marker}:** {entry.question}".rstrip())
    parts.append(f"**{config.answer_marker}:**\n\n{entry.answer}".rstrip())
    return "\n\n".join(parts)


def render_markdown(document: KnowledgeDocument, config: DocumentConfig) -> str:
    """Render the document so that parsing the output yields the same entries."""
    blocks: list[str] = []
    if document.preamble:
        blocks.append(document.preamble)
    blocks.extend(render_entry(entry=entry, config=config) for entry in document.entries)
    return f"\n\n{_SEPARATOR}\n\n".join(blocks) + "\n"
