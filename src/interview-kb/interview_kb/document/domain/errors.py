"""Error types raised by the document domain."""

from interview_kb.core.errors import InterviewKbError


class EntryNotFoundError(InterviewKbError):
    """Raised when an entry number is not present in the document."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Failed to find entry: no entry numbered {number}")
