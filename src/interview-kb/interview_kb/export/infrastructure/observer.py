"""Structlog implementation of the ExportObserver port."""

import structlog


class StructlogExportObserver:
    """Delegates export domain events to structlog.

    Satisfies the ExportObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def export_completed(
        self, source: str, export_format: str, destination: str, total_entries: int
    ) -> None:
        self._log.info(
            "export.completed",
            source=source,
            export_format=export_format,
            destination=destination,
            total_entries=total_entries,
        )

    def export_failed(self, destination: str, reason: str) -> None:
        self._log.error("export.failed", destination=destination, reason=reason)
