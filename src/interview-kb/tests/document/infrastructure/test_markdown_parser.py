"""Tests for the Markdown Q&A parser."""

from interview_kb.config.domain.document import DocumentConfig
from interview_kb.document.domain.parsed import ParsedDocument
from interview_kb.document.infrastructure.markdown_parser import MarkdownParser
from interview_kb.entry.domain.entry import Entry


def _parse(*lines: str, config: DocumentConfig | None = None) -> ParsedDocument:
    parser = MarkdownParser(config=config or DocumentConfig())
    return parser.parse("\n".join(lines))


def _single_entry(*lines: str) -> Entry:
    parsed = _parse(*lines)
    assert len(parsed.entries) == 1
    return parsed.entries[0]


class TestHeadings:
    """Entry headings are numbered ATX headings at the configured level."""

    def test_bold_heading_yields_number_and_title(self) -> None:
        entry = _single_entry(
            "### **7. Scenario: Drift**",
            "**Question:** q",
            "**Answer:** a",
        )

        assert entry.number == 7
        assert entry.title == "Scenario: Drift"

    def test_plain_heading_without_emphasis_is_recognised(self) -> None:
        entry = _single_entry("### 2. Plain title", "Question: q", "Answer: a")

        assert entry.number == 2
        assert entry.title == "Plain title"

    def test_closing_hashes_are_not_part_of_the_title(self) -> None:
        entry = _single_entry("### 1. Closed heading ###", "Question: q", "Answer: a")

        assert entry.title == "Closed heading"

    def test_heading_line_number_is_one_based(self) -> None:
        parsed = _parse("intro", "", "### **1. T**", "Question: q", "Answer: a")

        assert parsed.entries[0].line == 3

    def test_heading_at_other_level_is_body_text(self) -> None:
        entry = _single_entry(
            "### **1. T**",
            "Question: q",
            "Answer: a",
            "#### 2. Not an entry",
        )

        assert "#### 2. Not an entry" in entry.answer

    def test_number_without_title_gives_empty_title(self) -> None:
        entry = _single_entry("### **4.**", "Question: q", "Answer: a")

        assert entry.number == 4
        assert entry.title == ""

    def test_zero_is_not_an_entry_number(self) -> None:
        parsed = _parse("### **0. Scenario: zero**", "**Question:** q", "**Answer:** a")

        assert parsed.entries == []
        assert parsed.unnumbered_headings[0].text == "0. Scenario: zero"
        assert parsed.unnumbered_headings[0].line == 1

    def test_leading_zero_is_not_an_entry_number(self) -> None:
        parsed = _parse("### 1. T", "Question: q", "Answer: a", "### 02. Padded")

        assert [e.number for e in parsed.entries] == [1]
        assert parsed.unnumbered_headings[0].text == "02. Padded"

    def test_configured_heading_level_is_respected(self) -> None:
        parsed = _parse(
            "## 1. Second level",
            "Question: q",
            "Answer: a",
            "### 2. Third level",
            config=DocumentConfig(heading_level=2),
        )

        assert [e.number for e in parsed.entries] == [1]
        assert "### 2. Third level" in parsed.entries[0].answer

    def test_unnumbered_heading_is_recorded_and_kept_in_body(self) -> None:
        parsed = _parse(
            "### **1. T**",
            "Question: q",
            "Answer: a",
            "### Appendix",
        )

        assert len(parsed.unnumbered_headings) == 1
        assert parsed.unnumbered_headings[0].text == "Appendix"
        assert parsed.unnumbered_headings[0].line == 4
        assert parsed.entries[0].answer.endswith("### Appendix")


class TestSections:
    """Question and Answer markers split each entry into its sections."""

    def test_bold_markers_with_inner_colon(self) -> None:
        entry = _single_entry(
            "### **1. T**",
            "**Question:** What is drift?",
            "**Answer:** Divergence.",
        )

        assert entry.question == "What is drift?"
        assert entry.answer == "Divergence."

    def test_bold_markers_with_outer_colon(self) -> None:
        entry = _single_entry(
            "### **1. T**",
            "**Question**: What is drift?",
            "**Answer**: Divergence.",
        )

        assert entry.question == "What is drift?"
        assert entry.answer == "Divergence."

    def test_markers_are_case_insensitive(self) -> None:
        entry = _single_entry("### 1. T", "QUESTION: q?", "answer: a.")

        assert entry.question == "q?"
        assert entry.answer == "a."

    def test_question_may_span_several_lines(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "**Question:** first line",
            "second line",
            "",
            "**Answer:**",
            "a",
        )

        assert entry.question == "first line\nsecond line"

    def test_answer_body_keeps_prose_and_fences_verbatim(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "**Question:** q",
            "",
            "**Answer:**",
            "",
            "- bullet one",
            "  continued",
            "",
            "```hcl",
            'resource "aws_vpc" "main" {}',
            "```",
        )

        assert entry.answer == (
            "- bullet one\n  continued\n\n```hcl\nresource \"aws_vpc\" \"main\" {}\n```"
        )

    def test_trailing_thematic_break_and_blank_lines_are_dropped(self) -> None:
        parsed = _parse(
            "### 1. A",
            "Question: q1",
            "Answer: a1",
            "",
            "---",
            "",
            "### 2. B",
            "Question: q2",
            "Answer: a2",
        )

        assert parsed.entries[0].answer == "a1"

    def test_missing_question_gives_empty_string(self) -> None:
        entry = _single_entry("### 1. T", "**Answer:** a")

        assert entry.question == ""
        assert entry.answer == "a"

    def test_missing_answer_gives_empty_string(self) -> None:
        entry = _single_entry("### 1. T", "**Question:** q")

        assert entry.question == "q"
        assert entry.answer == ""

    def test_text_before_question_is_the_preface(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "",
            "Context for the scenario.",
            "",
            "**Question:** q",
            "**Answer:** a",
        )

        assert entry.preface == "Context for the scenario."
        assert entry.question == "q"

    def test_marker_inside_answer_is_answer_text(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "Question: q",
            "Answer: a",
            "Question: this is prose",
        )

        assert entry.question == "q"
        assert entry.answer == "a\nQuestion: this is prose"

    def test_custom_markers(self) -> None:
        parsed = _parse(
            "### 1. T",
            "**Q:** short question",
            "**A:** short answer",
            config=DocumentConfig(question_marker="Q", answer_marker="A"),
        )

        assert parsed.entries[0].question == "short question"
        assert parsed.entries[0].answer == "short answer"


class TestFences:
    """Fenced code blocks are collected and shield their content from parsing."""

    def test_code_block_language_and_content(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "Question: q",
            "Answer:",
            "```hcl",
            "lifecycle {",
            "  prevent_destroy = true",
            "}",
            "```",
        )

        assert len(entry.code_blocks) == 1
        block = entry.code_blocks[0]
        assert block.language == "hcl"
        assert block.content == "lifecycle {\n  prevent_destroy = true\n}"
        assert block.line == 4
        assert block.closed is True

    def test_language_is_first_word_of_info_string(self) -> None:
        entry = _single_entry(
            "### 1. T", "Question: q", "Answer:", "```bash title=x", "ls", "```"
        )

        assert entry.code_blocks[0].language == "bash"

    def test_language_tag_is_lower_cased(self) -> None:
        entry = _single_entry("### 1. T", "Question: q", "Answer:", "```HCL", "x", "```")

        assert entry.code_blocks[0].language == "hcl"

    def test_untagged_fence_has_empty_language(self) -> None:
        entry = _single_entry("### 1. T", "Question: q", "Answer:", "```", "x", "```")

        assert entry.code_blocks[0].language == ""

    def test_heading_inside_fence_does_not_start_an_entry(self) -> None:
        parsed = _parse(
            "### 1. T",
            "Question: q",
            "Answer:",
            "```markdown",
            "### 2. Not a real entry",
            "```",
        )

        assert [e.number for e in parsed.entries] == [1]
        assert parsed.entries[0].code_blocks[0].content == "### 2. Not a real entry"

    def test_marker_inside_fence_does_not_switch_section(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "Question: q",
            "```text",
            "Answer: inside fence",
            "```",
            "Answer: real",
        )

        assert entry.question == "q\n```text\nAnswer: inside fence\n```"
        assert entry.answer == "real"

    def test_tilde_fence_is_closed_only_by_tildes(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "Question: q",
            "Answer:",
            "~~~bash",
            "```",
            "echo hi",
            "~~~",
        )

        assert len(entry.code_blocks) == 1
        assert entry.code_blocks[0].content == "```\necho hi"
        assert entry.code_blocks[0].closed is True

    def test_longer_opening_fence_needs_long_enough_closer(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "Question: q",
            "Answer:",
            "````md",
            "```",
            "````",
        )

        assert entry.code_blocks[0].content == "```"
        assert entry.code_blocks[0].closed is True

    def test_indented_fence_inside_list_item(self) -> None:
        entry = _single_entry(
            "### 1. T",
            "Question: q",
            "Answer:",
            "- step:",
            "    ```bash",
            "    terraform init",
            "    ```",
        )

        assert entry.code_blocks[0].language == "bash"
        assert entry.code_blocks[0].closed is True

    def test_unterminated_fence_is_reported_as_unclosed(self) -> None:
        parsed = _parse(
            "### 1. T",
            "Question: q",
            "Answer:",
            "```hcl",
            "resource {",
            "### 2. Swallowed",
        )

        assert len(parsed.entries) == 1
        block = parsed.entries[0].code_blocks[0]
        assert block.closed is False
        assert block.content == "resource {\n### 2. Swallowed"

    def test_fences_in_preamble_belong_to_the_preamble(self) -> None:
        parsed = _parse("```bash", "echo intro", "```", "", "### 1. T", "Question: q", "Answer: a")

        assert len(parsed.preamble_code_blocks) == 1
        assert parsed.entries[0].code_blocks == []


class TestDocumentShape:
    """Preamble and entry ordering."""

    def test_preamble_is_text_before_first_entry(self) -> None:
        parsed = _parse("# Title", "", "Intro.", "", "---", "", "### 1. T", "Question: q", "Answer: a")

        assert parsed.preamble == "# Title\n\nIntro."

    def test_entries_keep_source_order(self) -> None:
        parsed = _parse(
            "### 3. C", "Question: q", "Answer: a",
            "### 1. A", "Question: q", "Answer: a",
            "### 2. B", "Question: q", "Answer: a",
        )

        assert [e.number for e in parsed.entries] == [3, 1, 2]

    def test_empty_text_has_no_entries(self) -> None:
        parsed = _parse("")

        assert parsed.entries == []
        assert parsed.preamble == ""
