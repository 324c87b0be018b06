"""Error types raised by document infrastructure."""

from interview_kb.core.errors import InterviewKbError


class DocumentLoadError(InterviewKbError):
    """Raised when a Markdown document cannot be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to load document: {reason}")
