"""Observer port for the integrity domain — defines events in domain language."""

from typing import Protocol


class IntegrityObserver(Protocol):
    def integrity_check_started(self, source: str, total_entries: int) -> None: ...

    def integrity_issue_found(
        self,
        code: str,
        severity: str,
        message: str,
        entry_number: int | None,
        line: int | None,
    ) -> None: ...

    def integrity_check_completed(
        self, source: str, total_errors: int, total_warnings: int
    ) -> None: ...
