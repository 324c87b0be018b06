"""Markdown document loader — reads a file and returns a KnowledgeDocument."""

import hashlib
from importlib.resources import files
from pathlib import Path
from typing import NoReturn

from interview_kb.document.domain.document import KnowledgeDocument
from interview_kb.document.domain.observer import DocumentObserver
from interview_kb.document.infrastructure.errors import DocumentLoadError
from interview_kb.document.infrastructure.markdown_parser import MarkdownParser

BUNDLED_PACKAGE = "interview_kb.content"
BUNDLED_DOCUMENT = "terraform_aws.md"


class MarkdownDocumentLoader:
    """Loads a Markdown knowledge document and returns an immutable KnowledgeDocument."""

    def __init__(self, parser: MarkdownParser, observer: DocumentObserver) -> None:
        self._parser = parser
        self._observer = observer

    def load(self, path: Path) -> KnowledgeDocument:
        """
        Load and parse the Markdown file at path.

        Raises:
            DocumentLoadError: if the file is missing, is a directory, cannot be
                read, or is not valid UTF-8.
        """
        source = str(path)
        self._observer.document_loading_started(path=source)
        try:
            raw = path.read_bytes()
        except FileNotFoundError as exc:
            self._fail(source=source, reason=f"file not found: {source}", exc=exc)
        except IsADirectoryError as exc:
            self._fail(source=source, reason=f"not a file: {source}", exc=exc)
        except OSError as exc:
            self._fail(source=source, reason=f"cannot read {source}: {exc.strerror or exc}", exc=exc)
        return self._build(raw=raw, source=source)

    def load_bundled(self) -> KnowledgeDocument:
        """Load the knowledge document shipped inside the package."""
        source = f"{BUNDLED_PACKAGE}/{BUNDLED_DOCUMENT}"
        self._observer.document_loading_started(path=source)
        raw = files(BUNDLED_PACKAGE).joinpath(BUNDLED_DOCUMENT).read_bytes()
        return self._build(raw=raw, source=source)

    def _build(self, raw: bytes, source: str) -> KnowledgeDocument:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._fail(source=source, reason=f"not valid UTF-8: {exc}", exc=exc)

        parsed = self._parser.parse(text)
        for entry in parsed.entries:
            self._observer.document_entry_parsed(
                number=entry.number, title=entry.title, line=entry.line
            )

        document = KnowledgeDocument(
            source=source,
            sha256=hashlib.sha256(raw).hexdigest(),
            preamble=parsed.preamble,
            preamble_code_blocks=parsed.preamble_code_blocks,
            entries=parsed.entries,
            unnumbered_headings=parsed.unnumbered_headings,
        )
        self._observer.document_loading_completed(
            path=source,
            total_entries=len(document.entries),
            sha256=document.sha256,
        )
        return document

    def _fail(self, source: str, reason: str, exc: Exception) -> NoReturn:
        self._observer.document_loading_failed(path=source, reason=reason)
        raise DocumentLoadError(reason=reason) from exc
