"""Base exception class for all interview-kb errors."""


class InterviewKbError(Exception):
    """Base class for all interview-kb errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
