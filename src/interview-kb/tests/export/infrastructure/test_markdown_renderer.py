"""Tests for canonical Markdown rendering."""

from interview_kb.config.domain.document import DocumentConfig
from interview_kb.document.domain.document import KnowledgeDocument
from interview_kb.document.infrastructure.markdown_loader import MarkdownDocumentLoader
from interview_kb.document.infrastructure.markdown_parser import MarkdownParser
from interview_kb.entry.domain.entry import Entry
from interview_kb.export.infrastructure.markdown_renderer import (
    render_entry,
    render_markdown,
)
from tests.document.fake_observer import FakeDocumentObserver


def _bundled() -> KnowledgeDocument:
    loader = MarkdownDocumentLoader(
        parser=MarkdownParser(config=DocumentConfig()),
        observer=FakeDocumentObserver(),
    )
    return loader.load_bundled()


def _content(entry: Entry) -> tuple[int, str, str, str, str, list[str]]:
    return (
        entry.number,
        entry.title,
        entry.preface,
        entry.question,
        entry.answer,
        [block.content for block in entry.code_blocks],
    )


class TestRenderEntry:
    def test_layout(self) -> None:
        entry = Entry(
            number=4,
            title="Scenario: Drift",
            question="How do you detect drift?",
            answer="Run a refresh-only plan.",
            line=1,
        )

        rendered = render_entry(entry=entry, config=DocumentConfig())

        assert rendered == (
            "### **4. Scenario: Drift**\n\n"
            "**Question:** How do you detect drift?\n\n"
            "**Answer:**\n\n"
            "Run a refresh-only plan."
        )

    def test_preface_is_rendered_before_question(self) -> None:
        entry = Entry(
            number=1, title="T", preface="Context.", question="q", answer="a", line=1
        )

        rendered = render_entry(entry=entry, config=DocumentConfig())

        assert rendered.index("Context.") < rendered.index("**Question:**")

    def test_configured_level_and_markers(self) -> None:
        entry = Entry(number=1, title="T", question="q", answer="a", line=1)
        config = DocumentConfig(heading_level=2, question_marker="Q", answer_marker="A")

        rendered = render_entry(entry=entry, config=config)

        assert rendered.startswith("## **1. T**")
        assert "**Q:** q" in rendered
        assert "**A:**" in rendered


class TestRenderDocument:
    def test_rendered_bundled_document_parses_back_to_same_entries(self) -> None:
        document = _bundled()
        config = DocumentConfig()

        reparsed = MarkdownParser(config=config).parse(
            render_markdown(document=document, config=config)
        )

        assert [_content(e) for e in reparsed.entries] == [
            _content(e) for e in document.entries
        ]
        assert reparsed.preamble == document.preamble

    def test_rendered_document_ends_with_newline(self) -> None:
        rendered = render_markdown(document=_bundled(), config=DocumentConfig())

        assert rendered.endswith("\n")
        assert not rendered.endswith("\n\n")
