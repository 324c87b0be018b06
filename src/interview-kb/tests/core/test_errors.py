"""Tests verifying the InterviewKbError type hierarchy."""

from pathlib import Path

from interview_kb.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from interview_kb.core.errors import InterviewKbError
from interview_kb.document.domain.errors import EntryNotFoundError
from interview_kb.document.infrastructure.errors import DocumentLoadError
from interview_kb.export.infrastructure.errors import ExportError


class TestInterviewKbErrorHierarchy:
    """All interview-kb exceptions inherit from InterviewKbError."""

    def test_missing_env_vars_error_is_interview_kb_error(self) -> None:
        assert isinstance(MissingEnvVarsError(missing={"X": ["name"]}), InterviewKbError)

    def test_config_validation_error_is_interview_kb_error(self) -> None:
        assert isinstance(ConfigValidationError(reason="bad"), InterviewKbError)

    def test_config_load_error_is_interview_kb_error(self) -> None:
        assert isinstance(ConfigLoadError(path=Path("kb.yaml")), InterviewKbError)

    def test_document_load_error_is_interview_kb_error(self) -> None:
        assert isinstance(DocumentLoadError(reason="file not found"), InterviewKbError)

    def test_entry_not_found_error_is_interview_kb_error(self) -> None:
        assert isinstance(EntryNotFoundError(number=3), InterviewKbError)

    def test_export_error_is_interview_kb_error(self) -> None:
        assert isinstance(ExportError(path=Path("out.jsonl"), reason="denied"), InterviewKbError)

    def test_interview_kb_error_is_exception(self) -> None:
        assert isinstance(InterviewKbError("test"), Exception)


class TestErrorMessages:
    """Every error message starts with 'Failed to '."""

    def test_messages_start_with_failed(self) -> None:
        errors: list[InterviewKbError] = [
            MissingEnvVarsError(missing={"B": ["name"]}),
            ConfigValidationError(reason="bad"),
            ConfigLoadError(path=Path("kb.yaml")),
            DocumentLoadError(reason="file not found"),
            EntryNotFoundError(number=3),
            ExportError(path=Path("out.jsonl"), reason="denied"),
        ]

        assert all(str(error).startswith("Failed to ") for error in errors)

    def test_missing_env_vars_are_listed_sorted_with_key_paths(self) -> None:
        error = MissingEnvVarsError(missing={"B": ["name"], "A": ["version", "export.answer_key"]})

        assert str(error).endswith("A (at version, export.answer_key), B (at name)")
