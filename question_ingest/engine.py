"""
Ingestion Engine
================
Main orchestrator that sniffs the input format, routes the text to the
matching parser and packages the outcome.

Usage:
    pipeline = IngestionPipeline(config)
    records = pipeline.ingest(raw_text)
    # or, with the reason for an empty result:
    result = pipeline.run(raw_text)

Architecture:
    raw text → FormatDetector → (PlainTextBlockParser | CsvRecordParser) →
    QuestionRecords → IngestResult

The core never raises for malformed input; an empty record list is the only
failure signal. Reading files is a convenience for callers (see
``ingest_file``) and may raise the usual I/O and decoding errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .csv_parser import CsvRecordParser
from .detector import detect
from .models import EmptyReason, IngestResult, QuestionRecord, SourceFormat
from .serializer import to_csv, to_plain_text
from .state_machine import PlainTextBlockParser

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

BYTE_ORDER_MARK = "\ufeff"


@dataclass
class IngestConfig:
    """Configuration for the ingestion pipeline."""

    # Input decoding (file helpers only)
    encoding: str = "utf-8"

    # Export
    export_format: str = "csv"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


def configure_logging(config: IngestConfig):
    """
    Configure the package logger from config.

    Only entry points (the CLI) call this; building or running a pipeline
    never touches logger state.
    """
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    package_logger = logging.getLogger("question_ingest")
    package_logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Console handler
    if not package_logger.handlers:
        console = logging.StreamHandler()
        console.setLevel(log_level)
        console.setFormatter(formatter)
        package_logger.addHandler(console)
    else:
        for handler in package_logger.handlers:
            handler.setLevel(log_level)

    # File handler
    if config.log_file:
        log_path = Path(config.log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename) == log_path.resolve()
            for h in package_logger.handlers
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)


def read_source(path: str, encoding: str = "utf-8") -> str:
    """
    Read and decode a question file, dropping a leading byte order mark.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file isn't valid in ``encoding``.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    logger.info(f"Reading: {file_path}")
    raw_text = file_path.read_text(encoding=encoding)
    if raw_text.startswith(BYTE_ORDER_MARK):
        raw_text = raw_text[len(BYTE_ORDER_MARK):]
    return raw_text


class IngestionPipeline:
    """
    Question ingestion pipeline.

    Orchestrates:
        1. Format detection
        2. Parsing (plain-text blocks or CSV rows)
        3. Empty-result classification

    Stateless between calls and safe to share across threads.
    """

    def __init__(self, config: Optional[IngestConfig] = None):
        self.config = config or IngestConfig()
        self.text_parser = PlainTextBlockParser()
        self.csv_parser = CsvRecordParser()

    def ingest(self, raw_text: str) -> list[QuestionRecord]:
        """
        Parse raw text into an ordered list of records.

        Returns:
            Records in source order; empty when nothing valid was found.
        """
        return self.run(raw_text).records

    def run(self, raw_text: str) -> IngestResult:
        """
        Parse raw text and report how it was interpreted.

        Args:
            raw_text: Decoded contents of a user-supplied file.

        Returns:
            IngestResult with the records, the detected and applied formats,
            and the reason when no records were produced.
        """
        detected = detect(raw_text)

        if detected == SourceFormat.CSV:
            parsed_as = SourceFormat.CSV
            records = self.csv_parser.parse(raw_text)
        else:
            parsed_as = SourceFormat.PLAIN_TEXT
            records = self.text_parser.parse(raw_text)

        logger.info(
            f"Detected {detected.value}, parsed as {parsed_as.value}: "
            f"{len(records)} questions"
        )

        empty_reason = None
        if not records:
            if raw_text.strip():
                empty_reason = EmptyReason.NO_COMPLETE_QUESTIONS
            else:
                empty_reason = EmptyReason.EMPTY_INPUT
            logger.warning(f"No questions ingested ({empty_reason.value})")

        return IngestResult(
            detected_format=detected,
            parsed_as=parsed_as,
            records=records,
            empty_reason=empty_reason,
        )

    def ingest_file(self, path: str) -> IngestResult:
        """
        Read a text or CSV file and run the pipeline on its contents.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            UnicodeDecodeError: If the file isn't valid in the configured
                encoding.
        """
        return self.run(read_source(path, self.config.encoding))

    def export(
        self,
        records: Iterable[QuestionRecord],
        export_format: Optional[str] = None,
    ) -> str:
        """Render records as CSV or plain text (defaults to config)."""
        export_format = export_format or self.config.export_format
        if export_format == "csv":
            return to_csv(records)
        if export_format == "text":
            return to_plain_text(records)
        raise ValueError(f"Unsupported export format: {export_format}")


def ingest(raw_text: str) -> list[QuestionRecord]:
    """Module-level shortcut: parse raw text with default settings."""
    return IngestionPipeline().ingest(raw_text)
