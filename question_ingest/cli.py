"""
CLI Interface
=============
Command-line interface for the question ingestion pipeline.

Usage:
    python -m question_ingest ingest <file> [options]
    python -m question_ingest detect <file>
    python -m question_ingest export <file> --format csv|text [-o out]
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .detector import detect
from .engine import (
    IngestConfig,
    IngestionPipeline,
    configure_logging,
    read_source,
)
from .models import IngestResult

console = Console()

EXIT_NO_QUESTIONS = 2

EMPTY_MESSAGES = {
    "empty_input": "The file is empty.",
    "no_complete_questions": "No complete four-option questions were found.",
}


@click.group()
@click.version_option(version=__version__, prog_name="question-ingest")
def cli():
    """Question Ingest: CSV and plain-text MCQ importer."""
    pass


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--encoding",
    default="utf-8",
    help="Text encoding of the input file",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON result to stdout (for programmatic use)",
)
def ingest(
    input_path: str,
    encoding: str,
    log_level: str,
    log_file: str,
    json_output: bool,
):
    """Parse a question file and list the records found."""

    if json_output:
        # Suppress console output for JSON mode
        log_level = "ERROR"

    config = IngestConfig(
        encoding=encoding,
        log_level=log_level,
        log_file=log_file,
    )

    result = _run(config, input_path)

    if json_output:
        click.echo(json.dumps(
            result.model_dump(mode="json"),
            indent=2,
            ensure_ascii=False,
        ))
    else:
        console.print()
        console.print(
            Panel.fit(
                f"[bold cyan]Question Ingest v{__version__}[/]\n"
                f"[dim]File: {os.path.basename(input_path)}[/]",
                border_style="cyan",
            )
        )
        console.print()
        _display_records(result)

    if result.is_empty:
        sys.exit(EXIT_NO_QUESTIONS)


@cli.command(name="detect")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8", help="Text encoding")
def detect_command(input_path: str, encoding: str):
    """Show which format a file would be parsed as."""
    configure_logging(IngestConfig(encoding=encoding, log_level="ERROR"))
    try:
        raw_text = read_source(input_path, encoding)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        console.print(f"[red]Error:[/] could not decode file: {e}")
        sys.exit(1)

    click.echo(detect(raw_text).value)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "-f", "export_format",
    default="csv",
    type=click.Choice(["csv", "text"]),
    help="Export format",
)
@click.option(
    "--output", "-o",
    default=None,
    help="Write to this file instead of stdout",
)
@click.option("--encoding", default="utf-8", help="Text encoding")
def export(input_path: str, export_format: str, output: str, encoding: str):
    """Re-export the questions of a file as CSV or plain text."""
    config = IngestConfig(
        encoding=encoding,
        export_format=export_format,
        log_level="ERROR",
    )
    pipeline = IngestionPipeline(config)
    result = _run(config, input_path, pipeline)

    if result.is_empty:
        console.print(f"[yellow]{_empty_message(result)}[/]")
        sys.exit(EXIT_NO_QUESTIONS)

    rendered = pipeline.export(result.records)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered, encoding="utf-8")
        console.print(
            f"[green]Exported {result.record_count} questions to {out_path}[/]"
        )
    else:
        click.echo(rendered, nl=False)


# ─── Helpers ──────────────────────────────────────────────────────────────────


def _run(config: IngestConfig, input_path: str, pipeline=None) -> IngestResult:
    """Run the pipeline on a file, turning read errors into exit code 1."""
    configure_logging(config)
    pipeline = pipeline or IngestionPipeline(config)
    try:
        return pipeline.ingest_file(input_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        console.print(
            f"[red]Error:[/] could not decode file as {config.encoding}: {e}"
        )
        sys.exit(1)


def _empty_message(result: IngestResult) -> str:
    reason = result.empty_reason.value if result.empty_reason else ""
    return "No valid questions found. " + EMPTY_MESSAGES.get(reason, "")


def _display_records(result: IngestResult):
    """Display parsed records in a rich table."""
    console.print(
        f"[dim]Detected: {result.detected_format.value} | "
        f"Parsed as: {result.parsed_as.value}[/]"
    )

    if result.is_empty:
        console.print(f"[yellow]{_empty_message(result)}[/]")
        console.print()
        return

    table = Table(title="Questions", border_style="green")
    table.add_column("#", justify="right", style="bold")
    table.add_column("Question")
    table.add_column("A")
    table.add_column("B")
    table.add_column("C")
    table.add_column("D")

    for record in result.records:
        table.add_row(
            str(record.ordinal),
            *(escape(text) for text in [record.prompt, *record.options]),
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Total:[/] {result.record_count} questions")
    console.print()


# ─── Entry point (for python -m question_ingest.cli) ──────────────────────────


if __name__ == "__main__":
    cli()
