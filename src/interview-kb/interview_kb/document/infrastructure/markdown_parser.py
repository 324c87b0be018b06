"""Markdown parser — turns the numbered Q&A layout into Entry value objects.

The parser is lenient: it never rejects a document on structural grounds.
Missing sections come back as empty strings, unterminated fences as
``CodeBlock(closed=False)``, and headings without a number are listed
separately. Deciding whether any of that is a problem is the job of the
integrity checker.
"""

import re
from dataclasses import dataclass, field

from interview_kb.config.domain.document import DocumentConfig
from interview_kb.document.domain.parsed import ParsedDocument, UnnumberedHeading
from interview_kb.entry.domain.code_block import CodeBlock
from interview_kb.entry.domain.entry import Entry

_HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})[ \t]+(?P<text>.*?)(?:[ \t]+#+)?[ \t]*$")
_NUMBERED_TITLE_PATTERN = re.compile(r"^(?P<number>[1-9]\d*)\.(?:[ \t]+(?P<title>.*))?$")
_FENCE_OPEN_PATTERN = re.compile(r"^[ \t]*(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_THEMATIC_BREAK_PATTERN = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
_EMPHASIS_EDGES = re.compile(r"^[*_]+|[*_]+$")
_EMPHASIS = r"(?:\*\*|__)?"

_PREFACE = "preface"
_QUESTION = "question"
_ANSWER = "answer"


@dataclass
class _OpenFence:
    char: str
    length: int
    language: str
    line: int
    lines: list[str] = field(default_factory=list)

    def closes_on(self, line: str) -> bool:
        stripped = line.strip()
        return (
            len(stripped) >= self.length
            and stripped == self.char * len(stripped)
        )

    def to_block(self, closed: bool) -> CodeBlock:
        return CodeBlock(
            language=self.language,
            content="\n".join(self.lines),
            line=self.line,
            closed=closed,
        )


@dataclass
class _Draft:
    """Mutable accumulator for the preamble or one entry while scanning."""

    number: int = 0
    title: str = ""
    line: int = 1
    section: str = _PREFACE
    sections: dict[str, list[str]] = field(
        default_factory=lambda: {_PREFACE: [], _QUESTION: [], _ANSWER: []}
    )
    code_blocks: list[CodeBlock] = field(default_factory=list)

    def append(self, line: str) -> None:
        self.sections[self.section].append(line)

    def build(self) -> Entry:
        return Entry(
            number=self.number,
            title=self.title,
            preface=_trim(self.sections[_PREFACE]),
            question=_trim(self.sections[_QUESTION]),
            answer=_trim(self.sections[_ANSWER]),
            line=self.line,
            code_blocks=list(self.code_blocks),
        )


class MarkdownParser:
    """Parses Markdown text laid out as numbered question/answer entries."""

    def __init__(self, config: DocumentConfig) -> None:
        self._heading_level = config.heading_level
        self._question_pattern = _marker_pattern(config.question_marker)
        self._answer_pattern = _marker_pattern(config.answer_marker)

    def parse(self, text: str) -> ParsedDocument:
        preamble = _Draft()
        drafts: list[_Draft] = []
        unnumbered: list[UnnumberedHeading] = []
        fence: _OpenFence | None = None

        for line_no, line in enumerate(text.splitlines(), start=1):
            target = drafts[-1] if drafts else preamble

            if fence is not None:
                if fence.closes_on(line):
                    target.code_blocks.append(fence.to_block(closed=True))
                    fence = None
                else:
                    fence.lines.append(line)
                target.append(line)
                continue

            fence = _open_fence(line=line, line_no=line_no)
            if fence is not None:
                target.append(line)
                continue

            heading = self._match_heading(line)
            if heading is not None:
                number, title = heading
                if number is None:
                    unnumbered.append(UnnumberedHeading(text=title, line=line_no))
                    target.append(line)
                else:
                    drafts.append(_Draft(number=number, title=title, line=line_no))
                continue

            if target is not preamble:
                rest = self._match_marker(draft=target, line=line)
                if rest is not None:
                    if rest:
                        target.append(rest)
                    continue
            target.append(line)

        if fence is not None:
            target = drafts[-1] if drafts else preamble
            target.code_blocks.append(fence.to_block(closed=False))

        return ParsedDocument(
            preamble=_trim(preamble.sections[_PREFACE]),
            preamble_code_blocks=preamble.code_blocks,
            entries=[draft.build() for draft in drafts],
            unnumbered_headings=unnumbered,
        )

    def _match_heading(self, line: str) -> tuple[int | None, str] | None:
        """Return (number, title) for an entry-level heading, else None.

        A heading at the entry level without a leading ``N.`` yields
        ``(None, text)``.
        """
        match = _HEADING_PATTERN.match(line)
        if match is None or len(match.group("hashes")) != self._heading_level:
            return None

        text = _strip_emphasis(match.group("text"))
        numbered = _NUMBERED_TITLE_PATTERN.match(text)
        if numbered is None:
            return None, text
        return int(numbered.group("number")), _strip_emphasis(
            numbered.group("title") or ""
        )

    def _match_marker(self, draft: _Draft, line: str) -> str | None:
        """Advance the draft's section on a marker line; return the text after it."""
        if draft.section == _PREFACE:
            match = self._question_pattern.match(line)
            if match is not None:
                draft.section = _QUESTION
                return match.group("rest")
        if draft.section in (_PREFACE, _QUESTION):
            match = self._answer_pattern.match(line)
            if match is not None:
                draft.section = _ANSWER
                return match.group("rest")
        return None


def _marker_pattern(marker: str) -> re.Pattern[str]:
    """Match ``**Marker:**``, ``**Marker**:`` and ``Marker:`` at line start."""
    return re.compile(
        rf"^[ \t]*{_EMPHASIS}{re.escape(marker)}{_EMPHASIS}[ \t]*:{_EMPHASIS}[ \t]*(?P<rest>.*?)[ \t]*$",
        re.IGNORECASE,
    )


def _open_fence(line: str, line_no: int) -> _OpenFence | None:
    match = _FENCE_OPEN_PATTERN.match(line)
    if match is None:
        return None
    fence = match.group("fence")
    info = match.group("info").strip()
    # Backtick fences may not carry backticks in their info string.
    if fence[0] == "`" and "`" in info:
        return None
    language = info.split()[0] if info else ""
    return _OpenFence(char=fence[0], length=len(fence), language=language, line=line_no)


def _strip_emphasis(text: str) -> str:
    return _EMPHASIS_EDGES.sub("", text.strip()).strip()


def _trim(lines: list[str]) -> str:
    """Join section lines, dropping blank edges and a trailing thematic break."""
    end = len(lines)
    while end > 0 and (
        not lines[end - 1].strip() or _THEMATIC_BREAK_PATTERN.match(lines[end - 1])
    ):
        end -= 1
    start = 0
    while start < end and not lines[start].strip():
        start += 1
    return "\n".join(lines[start:end])
