"""
Question Serializer
===================
Renders QuestionRecords back to CSV or plain text for export.

Both shapes are exactly what the parsers read, so exported files can be
ingested again unchanged.
"""

from __future__ import annotations

from typing import Iterable

from .models import QuestionRecord
from .tokenizer import DELIMITER, QUOTE

CSV_HEADER = "سوال,اختیار الف,اختیار ب,اختیار ج,اختیار د"

OPTION_LABELS = ("الف", "ب", "ج", "د")


def _csv_field(value: str) -> str:
    if DELIMITER in value or QUOTE in value:
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def to_csv(records: Iterable[QuestionRecord]) -> str:
    lines = [CSV_HEADER]
    for record in records:
        lines.append(DELIMITER.join(
            _csv_field(value) for value in [record.prompt, *record.options]
        ))
    return "\n".join(lines) + "\n"


def to_plain_text(records: Iterable[QuestionRecord]) -> str:
    """One numbered block per record (1-based), blank line after each."""
    parts = []
    for index, record in enumerate(records, start=1):
        parts.append(f"{index}. {record.prompt}\n")
        for label, option in zip(OPTION_LABELS, record.options):
            parts.append(f"{label}) {option}\n")
        parts.append("\n")
    return "".join(parts)
