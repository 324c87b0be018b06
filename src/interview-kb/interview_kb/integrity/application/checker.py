"""IntegrityChecker — runs every document-integrity check and reports all issues."""

from interview_kb.config.domain.integrity import IntegrityConfig
from interview_kb.document.domain.document import KnowledgeDocument
from interview_kb.entry.domain.code_block import CodeBlock
from interview_kb.entry.domain.entry import Entry
from interview_kb.integrity.domain.issue import IntegrityIssue, IssueCode, Severity
from interview_kb.integrity.domain.observer import IntegrityObserver
from interview_kb.integrity.domain.report import IntegrityReport


class IntegrityChecker:
    """Checks a KnowledgeDocument against the structural rules of the Q&A layout.

    Every check runs on every entry; issues are collected and returned in a
    single IntegrityReport rather than raised, so one pass over a broken
    document shows everything that needs fixing.
    """

    def __init__(self, config: IntegrityConfig, observer: IntegrityObserver) -> None:
        self._config = config
        self._observer = observer

    def check(self, document: KnowledgeDocument) -> IntegrityReport:
        self._observer.integrity_check_started(
            source=document.source, total_entries=len(document.entries)
        )

        issues: list[IntegrityIssue] = []
        issues.extend(self._check_code_blocks(document.preamble_code_blocks, None))
        issues.extend(_check_numbering(document.entries))
        for entry in document.entries:
            issues.extend(_check_sections(entry))
            issues.extend(self._check_code_blocks(entry.code_blocks, entry.number))
        issues.extend(_check_unnumbered_headings(document))
        issues.extend(self._check_entry_count(document))

        for issue in issues:
            self._observer.integrity_issue_found(
                code=issue.code.value,
                severity=issue.severity.value,
                message=issue.message,
                entry_number=issue.entry_number,
                line=issue.line,
            )

        report = IntegrityReport(
            source=document.source,
            sha256=document.sha256,
            total_entries=len(document.entries),
            issues=issues,
        )
        self._observer.integrity_check_completed(
            source=document.source,
            total_errors=len(report.errors),
            total_warnings=len(report.warnings),
        )
        return report

    def _check_code_blocks(
        self, blocks: list[CodeBlock], entry_number: int | None
    ) -> list[IntegrityIssue]:
        where = "preamble" if entry_number is None else f"entry {entry_number}"
        allowed = self._config.allowed_code_languages
        issues: list[IntegrityIssue] = []

        for block in blocks:
            if not block.closed:
                issues.append(
                    _error(
                        IssueCode.UNCLOSED_FENCE,
                        f"{where}: code block opened on line {block.line} is never closed",
                        entry_number,
                        block.line,
                    )
                )
            if not block.language:
                if self._config.require_code_language:
                    issues.append(
                        _warning(
                            IssueCode.UNTAGGED_FENCE,
                            f"{where}: code block on line {block.line} has no language tag",
                            entry_number,
                            block.line,
                        )
                    )
            elif allowed is not None and block.language not in allowed:
                issues.append(
                    _warning(
                        IssueCode.UNKNOWN_LANGUAGE,
                        f"{where}: code block on line {block.line} uses"
                        f" unlisted language '{block.language}'",
                        entry_number,
                        block.line,
                    )
                )
            if block.closed and not block.content.strip():
                issues.append(
                    _warning(
                        IssueCode.EMPTY_FENCE,
                        f"{where}: code block on line {block.line} is empty",
                        entry_number,
                        block.line,
                    )
                )
        return issues

    def _check_entry_count(self, document: KnowledgeDocument) -> list[IntegrityIssue]:
        if not document.entries:
            return [_error(IssueCode.NO_ENTRIES, "document contains no entries")]

        expected = self._config.expected_entry_count
        actual = len(document.entries)
        if expected is None or expected == actual:
            return []
        return [
            _error(
                IssueCode.ENTRY_COUNT,
                f"expected {expected} entries, found {actual}",
            )
        ]


def _check_sections(entry: Entry) -> list[IntegrityIssue]:
    issues: list[IntegrityIssue] = []
    if not entry.title.strip():
        issues.append(
            _error(
                IssueCode.EMPTY_TITLE,
                f"entry {entry.number}: heading has no title",
                entry.number,
                entry.line,
            )
        )
    if not entry.question.strip():
        issues.append(
            _error(
                IssueCode.MISSING_QUESTION,
                f"entry {entry.number}: question section is missing or empty",
                entry.number,
                entry.line,
            )
        )
    if not entry.answer.strip():
        issues.append(
            _error(
                IssueCode.MISSING_ANSWER,
                f"entry {entry.number}: answer section is missing or empty",
                entry.number,
                entry.line,
            )
        )
    return issues


def _check_numbering(entries: list[Entry]) -> list[IntegrityIssue]:
    """Numbering must start at 1 and increase by exactly one per entry."""
    issues: list[IntegrityIssue] = []
    seen: set[int] = set()
    highest = 0

    for index, entry in enumerate(entries):
        number = entry.number
        if index == 0 and number != 1:
            issues.append(
                _error(
                    IssueCode.NUMBERING_START,
                    f"first entry is numbered {number}, expected 1",
                    number,
                    entry.line,
                )
            )
        elif number in seen:
            issues.append(
                _error(
                    IssueCode.NUMBERING_DUPLICATE,
                    f"entry {number} is numbered more than once",
                    number,
                    entry.line,
                )
            )
        elif number < highest:
            issues.append(
                _error(
                    IssueCode.NUMBERING_ORDER,
                    f"entry {number} appears after entry {highest}",
                    number,
                    entry.line,
                )
            )
        elif index > 0 and number > highest + 1:
            missing = _describe_range(highest + 1, number - 1)
            issues.append(
                _error(
                    IssueCode.NUMBERING_GAP,
                    f"entry {number} follows entry {highest}; missing {missing}",
                    number,
                    entry.line,
                )
            )
        seen.add(number)
        highest = max(highest, number)

    return issues


def _check_unnumbered_headings(document: KnowledgeDocument) -> list[IntegrityIssue]:
    return [
        _error(
            IssueCode.UNNUMBERED_HEADING,
            f"heading on line {heading.line} has no entry number: {heading.text!r}",
            None,
            heading.line,
        )
        for heading in document.unnumbered_headings
    ]


def _describe_range(first: int, last: int) -> str:
    if first == last:
        return f"entry {first}"
    return f"entries {first}-{last}"


def _error(
    code: IssueCode,
    message: str,
    entry_number: int | None = None,
    line: int | None = None,
) -> IntegrityIssue:
    return IntegrityIssue(
        code=code,
        severity=Severity.ERROR,
        message=message,
        entry_number=entry_number,
        line=line,
    )


def _warning(
    code: IssueCode,
    message: str,
    entry_number: int | None = None,
    line: int | None = None,
) -> IntegrityIssue:
    return IntegrityIssue(
        code=code,
        severity=Severity.WARNING,
        message=message,
        entry_number=entry_number,
        line=line,
    )
