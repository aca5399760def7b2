"""
CSV Record Parser
=================
One question per line: prompt, option A, option B, option C, option D.

An optional header row is recognized on the first non-empty line only.
Lines with fewer than five fields are skipped.
"""

from __future__ import annotations

import logging

from .models import QuestionRecord
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

# Substrings marking a header row ("question" matched case-insensitively)
HEADER_KEYWORDS = ("سوال", "question")

MIN_COLUMNS = 5


def is_header(line: str) -> bool:
    folded = line.casefold()
    return any(keyword in folded for keyword in HEADER_KEYWORDS)


class CsvRecordParser:
    """Builds QuestionRecords from comma-separated rows."""

    def parse(self, text: str) -> list[QuestionRecord]:
        records: list[QuestionRecord] = []
        first_line = True

        for line_number, line in enumerate(text.splitlines(), start=1):
            line_str = line.strip()
            if not line_str:
                continue

            if first_line:
                first_line = False
                if is_header(line_str):
                    logger.debug(f"Skipping header row on line {line_number}")
                    continue

            columns = tokenize(line_str)
            if len(columns) < MIN_COLUMNS:
                logger.debug(
                    f"Skipping line {line_number}: "
                    f"{len(columns)} of {MIN_COLUMNS} columns"
                )
                continue

            records.append(self._build(columns, ordinal=len(records)))

        return records

    def _build(self, columns: list[str], ordinal: int) -> QuestionRecord:
        def column(index: int) -> str:
            return columns[index].strip() if index < len(columns) else ""

        return QuestionRecord(
            ordinal=ordinal,
            prompt=column(0),
            option_a=column(1),
            option_b=column(2),
            option_c=column(3),
            option_d=column(4),
        )
