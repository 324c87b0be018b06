"""IntegrityReport — the aggregate result of checking one document."""

from pydantic import BaseModel, Field

from interview_kb.integrity.domain.issue import IntegrityIssue, IssueCode, Severity


class IntegrityReport(BaseModel, frozen=True):
    source: str = Field(min_length=1)
    sha256: str = Field(min_length=1)
    total_entries: int = Field(ge=0)
    issues: list[IntegrityIssue]

    @property
    def errors(self) -> list[IntegrityIssue]:
        return [issue for issue in self.issues if issue.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[IntegrityIssue]:
        return [issue for issue in self.issues if issue.severity is Severity.WARNING]

    def passed(self, strict: bool = False) -> bool:
        """True when there are no errors; with strict, no warnings either."""
        if strict:
            return not self.issues
        return not self.errors

    def codes(self) -> list[IssueCode]:
        return [issue.code for issue in self.issues]
