"""Observer port for the export domain — defines events in domain language."""

from typing import Protocol


class ExportObserver(Protocol):
    def export_completed(
        self, source: str, export_format: str, destination: str, total_entries: int
    ) -> None: ...

    def export_failed(self, destination: str, reason: str) -> None: ...
