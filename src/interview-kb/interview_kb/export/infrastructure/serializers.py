"""JSON and JSONL serialization of a KnowledgeDocument."""

from typing import Any, TypeAlias

from interview_kb.config.domain.export import ExportConfig
from interview_kb.document.domain.document import KnowledgeDocument

JsonDict: TypeAlias = dict[str, Any]


def build_jsonl_records(document: KnowledgeDocument, config: ExportConfig) -> list[JsonDict]:
    """Build one question/answer record per entry, in document order.

    The question and answer keys come from config so the output can feed any
    dataset loader keyed on question/answer fields.
    """
    records: list[JsonDict] = []
    for entry in document.entries:
        record: JsonDict = {"id": str(entry.number)}
        if config.include_title:
            record["title"] = entry.title
        record[config.question_key] = entry.question
        record[config.answer_key] = entry.answer
        records.append(record)
    return records


def build_json(document: KnowledgeDocument) -> JsonDict:
    """Serialize the whole document, code blocks included."""
    data = document.model_dump(mode="json")
    data["entry_count"] = len(document.entries)
    for entry_data, entry in zip(data["entries"], document.entries, strict=True):
        entry_data["languages"] = entry.languages
    return data
