"""CLI entrypoint for interview-kb — typer app over the bundled Q&A document."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from interview_kb.config.domain.config import KbConfig
from interview_kb.config.infrastructure.observer import StructlogConfigObserver
from interview_kb.config.infrastructure.yaml_loader import YamlConfigLoader
from interview_kb.core.errors import InterviewKbError
from interview_kb.document.domain.document import KnowledgeDocument
from interview_kb.document.infrastructure.markdown_loader import MarkdownDocumentLoader
from interview_kb.document.infrastructure.markdown_parser import MarkdownParser
from interview_kb.document.infrastructure.observer import StructlogDocumentObserver
from interview_kb.entry.domain.entry import Entry
from interview_kb.export.application.exporter import DocumentExporter
from interview_kb.export.domain.format import ExportFormat
from interview_kb.export.infrastructure.markdown_renderer import render_entry
from interview_kb.export.infrastructure.observer import StructlogExportObserver
from interview_kb.integrity.application.checker import IntegrityChecker
from interview_kb.integrity.domain.issue import Severity
from interview_kb.integrity.domain.report import IntegrityReport
from interview_kb.integrity.infrastructure.observer import StructlogIntegrityObserver

app = typer.Typer(add_completion=False, help="Query and check the Terraform/AWS interview Q&A document.")

_DOCUMENT_HELP = "Markdown document to read (defaults to the bundled document)"
_CONFIG_HELP = "Path to an interview-kb config YAML"
_LOG_FORMAT_HELP = "Log format: 'console' or 'json'"


def _configure_structlog(log_format: str) -> None:
    """Configure structlog to write to stderr so command output stays on stdout."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=False)
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@contextmanager
def _cli_errors() -> Iterator[None]:
    """Turn project errors into a message on stderr and exit code 1."""
    try:
        yield
    except typer.Exit:
        raise
    except InterviewKbError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        raise typer.Exit(code=1) from exc


def _load_config(config_path: Path | None) -> KbConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load_optional(path=config_path)


def _load_document(document_path: Path | None, config: KbConfig) -> KnowledgeDocument:
    loader = MarkdownDocumentLoader(
        parser=MarkdownParser(config=config.document),
        observer=StructlogDocumentObserver(),
    )
    if document_path is None:
        return loader.load_bundled()
    return loader.load(path=document_path)


def _entries_table(entries: list[Entry], title: str) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Code", style="dim")
    for entry in entries:
        table.add_row(str(entry.number), entry.title, ", ".join(entry.languages))
    return table


def _print_report(report: IntegrityReport, strict: bool) -> None:
    console = Console()
    if report.issues:
        table = Table(title=f"Integrity issues in {report.source}", title_justify="left")
        table.add_column("Severity", no_wrap=True)
        table.add_column("Code", no_wrap=True)
        table.add_column("Entry", justify="right")
        table.add_column("Line", justify="right")
        table.add_column("Message")
        for issue in report.issues:
            style = "red" if issue.severity is Severity.ERROR else "yellow"
            table.add_row(
                f"[{style}]{issue.severity.value}[/{style}]",
                issue.code.value,
                "" if issue.entry_number is None else str(issue.entry_number),
                "" if issue.line is None else str(issue.line),
                issue.message,
            )
        console.print(table)

    status = "OK" if report.passed(strict=strict) else "FAILED"
    typer.echo(
        f"{status}: {report.total_entries} entries,"
        f" {len(report.errors)} errors, {len(report.warnings)} warnings"
    )


@app.command()
def check(
    document_path: Path | None = typer.Argument(None, help=_DOCUMENT_HELP),
    config_path: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    expected_count: int | None = typer.Option(
        None,
        "--expected-count",
        min=1,
        help="Fail unless the document has exactly this many entries",
    ),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as failures"),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Run the document integrity checks."""
    _configure_structlog(log_format=log_format)
    with _cli_errors():
        config = _load_config(config_path=config_path)
        integrity_config = config.integrity
        if expected_count is not None:
            integrity_config = integrity_config.model_copy(
                update={"expected_entry_count": expected_count}
            )
        document = _load_document(document_path=document_path, config=config)
        checker = IntegrityChecker(
            config=integrity_config, observer=StructlogIntegrityObserver()
        )
        report = checker.check(document=document)
        _print_report(report=report, strict=strict)

    if not report.passed(strict=strict):
        raise typer.Exit(code=1)


@app.command("list")
def list_entries(
    document_path: Path | None = typer.Argument(None, help=_DOCUMENT_HELP),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Only entries with a code block in this language"
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """List the entries of the document."""
    _configure_structlog(log_format=log_format)
    if language is not None and not language.strip():
        raise typer.BadParameter("language must not be blank", param_hint="--language")
    with _cli_errors():
        config = _load_config(config_path=config_path)
        document = _load_document(document_path=document_path, config=config)
        entries = document.entries if language is None else document.with_language(language)
        Console().print(_entries_table(entries=entries, title=f"{len(entries)} entries"))


@app.command()
def show(
    number: int = typer.Argument(..., help="Entry number"),
    document_path: Path | None = typer.Argument(None, help=_DOCUMENT_HELP),
    config_path: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Print one entry as Markdown."""
    _configure_structlog(log_format=log_format)
    with _cli_errors():
        config = _load_config(config_path=config_path)
        document = _load_document(document_path=document_path, config=config)
        entry = document.entry(number)
        typer.echo(render_entry(entry=entry, config=config.document))


@app.command()
def search(
    term: str = typer.Argument(..., help="Case-insensitive text to look for"),
    document_path: Path | None = typer.Argument(None, help=_DOCUMENT_HELP),
    config_path: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Find entries whose title, question or answer mention TERM."""
    _configure_structlog(log_format=log_format)
    if not term.strip():
        raise typer.BadParameter("search term must not be blank", param_hint="TERM")
    with _cli_errors():
        config = _load_config(config_path=config_path)
        document = _load_document(document_path=document_path, config=config)
        matches = document.search(term)
        if not matches:
            typer.echo(f"No entries match {term!r}.")
            return
        Console().print(
            _entries_table(entries=matches, title=f"{len(matches)} entries match {term!r}")
        )


@app.command()
def export(
    document_path: Path | None = typer.Argument(None, help=_DOCUMENT_HELP),
    export_format: ExportFormat = typer.Option(
        ExportFormat.JSONL, "--format", "-f", help="Output format"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Destination file (defaults to stdout)"
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Export the document as JSONL, JSON or canonical Markdown."""
    _configure_structlog(log_format=log_format)
    with _cli_errors():
        config = _load_config(config_path=config_path)
        document = _load_document(document_path=document_path, config=config)
        exporter = DocumentExporter(config=config, observer=StructlogExportObserver())
        if output is None:
            typer.echo(
                exporter.render(document=document, export_format=export_format), nl=False
            )
            return
        written = exporter.write(
            document=document, export_format=export_format, path=output
        )
        typer.echo(f"Wrote {len(document.entries)} entries to {written}")


@app.command()
def stats(
    document_path: Path | None = typer.Argument(None, help=_DOCUMENT_HELP),
    config_path: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Summarise the document: entry count, digest and code blocks per language."""
    _configure_structlog(log_format=log_format)
    with _cli_errors():
        config = _load_config(config_path=config_path)
        document = _load_document(document_path=document_path, config=config)

        typer.echo(f"Source:  {document.source}")
        typer.echo(f"SHA256:  {document.sha256}")
        typer.echo(f"Entries: {len(document.entries)}")

        counts = document.language_counts()
        if not counts:
            typer.echo("Code blocks: none")
            return
        table = Table(title="Code blocks", title_justify="left")
        table.add_column("Language")
        table.add_column("Blocks", justify="right")
        for language, count in counts.items():
            table.add_row(language or "(untagged)", str(count))
        Console().print(table)


if __name__ == "__main__":
    app()
