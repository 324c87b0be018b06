"""DocumentExporter — renders a KnowledgeDocument in a chosen format and writes it out."""

import json
from pathlib import Path

from interview_kb.config.domain.config import KbConfig
from interview_kb.document.domain.document import KnowledgeDocument
from interview_kb.export.domain.format import ExportFormat
from interview_kb.export.domain.observer import ExportObserver
from interview_kb.export.infrastructure.errors import ExportError
from interview_kb.export.infrastructure.markdown_renderer import render_markdown
from interview_kb.export.infrastructure.serializers import (
    build_json,
    build_jsonl_records,
)


class DocumentExporter:
    """Turns a KnowledgeDocument into JSONL, JSON or canonical Markdown text."""

    def __init__(self, config: KbConfig, observer: ExportObserver) -> None:
        self._config = config
        self._observer = observer

    def render(self, document: KnowledgeDocument, export_format: ExportFormat) -> str:
        match export_format:
            case ExportFormat.JSONL:
                records = build_jsonl_records(
                    document=document, config=self._config.export
                )
                return "".join(
                    json.dumps(record, ensure_ascii=False) + "\n" for record in records
                )
            case ExportFormat.JSON:
                return json.dumps(build_json(document), indent=2, ensure_ascii=False) + "\n"
            case ExportFormat.MARKDOWN:
                return render_markdown(document=document, config=self._config.document)

    def write(
        self,
        document: KnowledgeDocument,
        export_format: ExportFormat,
        path: Path,
    ) -> Path:
        """
        Render the document and write it to path as UTF-8, creating parent directories.

        Raises:
            ExportError: if the destination cannot be written.
        """
        content = self.render(document=document, export_format=export_format)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            self._observer.export_failed(destination=str(path), reason=str(exc))
            raise ExportError(path=path, reason=str(exc)) from exc

        self._observer.export_completed(
            source=document.source,
            export_format=export_format.value,
            destination=str(path),
            total_entries=len(document.entries),
        )
        return path
