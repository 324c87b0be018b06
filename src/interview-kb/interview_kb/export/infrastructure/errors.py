"""Error types raised by export infrastructure."""

from pathlib import Path

from interview_kb.core.errors import InterviewKbError


class ExportError(InterviewKbError):
    """Raised when an export cannot be written to its destination."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write export to {path}: {reason}")
