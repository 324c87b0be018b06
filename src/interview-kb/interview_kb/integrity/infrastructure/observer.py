"""Structlog implementation of the IntegrityObserver port."""

import structlog


class StructlogIntegrityObserver:
    """Delegates integrity domain events to structlog.

    Satisfies the IntegrityObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def integrity_check_started(self, source: str, total_entries: int) -> None:
        self._log.info(
            "integrity.check_started", source=source, total_entries=total_entries
        )

    def integrity_issue_found(
        self,
        code: str,
        severity: str,
        message: str,
        entry_number: int | None,
        line: int | None,
    ) -> None:
        log = self._log.error if severity == "error" else self._log.warning
        log(
            "integrity.issue_found",
            code=code,
            message=message,
            entry_number=entry_number,
            line=line,
        )

    def integrity_check_completed(
        self, source: str, total_errors: int, total_warnings: int
    ) -> None:
        self._log.info(
            "integrity.check_completed",
            source=source,
            total_errors=total_errors,
            total_warnings=total_warnings,
        )
