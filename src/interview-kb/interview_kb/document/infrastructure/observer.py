"""Structlog implementation of the DocumentObserver port."""

import structlog


class StructlogDocumentObserver:
    """Delegates document domain events to structlog.

    Satisfies the DocumentObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def document_loading_started(self, path: str) -> None:
        self._log.info("document.loading_started", path=path)

    def document_entry_parsed(self, number: int, title: str, line: int) -> None:
        self._log.debug("document.entry_parsed", number=number, title=title, line=line)

    def document_loading_completed(
        self, path: str, total_entries: int, sha256: str
    ) -> None:
        self._log.info(
            "document.loading_completed",
            path=path,
            total_entries=total_entries,
            sha256=sha256,
        )

    def document_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("document.loading_failed", path=path, reason=reason)
