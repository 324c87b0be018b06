"""IntegrityIssue — one problem found while checking a knowledge document."""

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    NO_ENTRIES = "no-entries"
    EMPTY_TITLE = "empty-title"
    MISSING_QUESTION = "missing-question"
    MISSING_ANSWER = "missing-answer"
    NUMBERING_START = "numbering-start"
    NUMBERING_DUPLICATE = "numbering-duplicate"
    NUMBERING_ORDER = "numbering-order"
    NUMBERING_GAP = "numbering-gap"
    UNCLOSED_FENCE = "unclosed-fence"
    ENTRY_COUNT = "entry-count"
    UNNUMBERED_HEADING = "unnumbered-heading"
    UNTAGGED_FENCE = "untagged-fence"
    UNKNOWN_LANGUAGE = "unknown-language"
    EMPTY_FENCE = "empty-fence"


class IntegrityIssue(BaseModel, frozen=True):
    """Immutable description of a single integrity problem.

    ``entry_number`` is None for document-level issues; ``line`` points at
    the offending source line where one exists.
    """

    code: IssueCode
    severity: Severity
    message: str = Field(min_length=1)
    entry_number: int | None = None
    line: int | None = None
