"""Observer port for the document domain — defines events in domain language."""

from typing import Protocol


class DocumentObserver(Protocol):
    def document_loading_started(self, path: str) -> None: ...

    def document_entry_parsed(self, number: int, title: str, line: int) -> None: ...

    def document_loading_completed(
        self, path: str, total_entries: int, sha256: str
    ) -> None: ...

    def document_loading_failed(self, path: str, reason: str) -> None: ...
