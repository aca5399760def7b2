"""
Plain-Text Block Parser
=======================
Line-oriented state machine that turns numbered question blocks into
four-option QuestionRecords.

Expected shape (Urdu or Latin option letters)::

    1. سوال؟
    الف) جواب
    ب) جواب
    ج) جواب
    د) جواب

Blocks are separated by blank lines, or simply by the next numbered
question. Incomplete blocks are dropped without error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .models import OptionSlot, QuestionRecord

logger = logging.getLogger(__name__)

# ─── Line Patterns ────────────────────────────────────────────────────────────

# "12. What is ...", "3) ...", also Urdu digits "۱۲. ..."
QUESTION_PATTERN = re.compile(r"^(\d+)[.)]\s*(.+)$")

# "الف) ...", "ب. ...", "a) ...", "D. ..."
OPTION_PATTERN = re.compile(r"^(الف|[^\W\d_])[.)]\s*(.+)$")

# Normalized letter token -> option slot
LETTER_SLOTS: dict[str, OptionSlot] = {
    "الف": OptionSlot.A,
    "ا": OptionSlot.A,
    "a": OptionSlot.A,
    "ب": OptionSlot.B,
    "b": OptionSlot.B,
    "ج": OptionSlot.C,
    "c": OptionSlot.C,
    "د": OptionSlot.D,
    "d": OptionSlot.D,
}

OPTIONS_PER_QUESTION = len(OptionSlot)


def letter_to_slot(token: str) -> Optional[OptionSlot]:
    """Map an option letter (any case, Urdu or Latin) to its slot."""
    return LETTER_SLOTS.get(token.strip().lower())


@dataclass
class RecordBuilder:
    """Mutable accumulator for a question still receiving options."""
    prompt: str
    slots: dict[OptionSlot, str] = field(default_factory=dict)
    filled: int = 0

    def set_option(self, slot: OptionSlot, text: str):
        # A repeated letter overwrites the text but still counts as a fill.
        self.slots[slot] = text
        self.filled += 1

    @property
    def is_complete(self) -> bool:
        return self.filled == OPTIONS_PER_QUESTION

    def build(self, ordinal: int) -> QuestionRecord:
        return QuestionRecord(
            ordinal=ordinal,
            prompt=self.prompt,
            option_a=self.slots.get(OptionSlot.A, ""),
            option_b=self.slots.get(OptionSlot.B, ""),
            option_c=self.slots.get(OptionSlot.C, ""),
            option_d=self.slots.get(OptionSlot.D, ""),
        )


class PlainTextBlockParser:
    """
    Finite state machine over text lines.

    Holds no state between calls; every ``parse`` works on its own
    accumulator, so one instance may be shared freely.
    """

    def parse(self, text: str) -> list[QuestionRecord]:
        """Parse plain text into records, ordinals assigned in finalize order."""
        records: list[QuestionRecord] = []
        builder: Optional[RecordBuilder] = None

        for line in text.splitlines():
            line_str = line.strip()

            # ─── 1. Blank line: block terminator ───
            if not line_str:
                if builder is not None:
                    self._finalize(builder, records)
                    builder = None
                continue

            # ─── 2. Numbered question starts a new block ───
            q_match = QUESTION_PATTERN.match(line_str)
            if q_match:
                if builder is not None:
                    self._finalize(builder, records)
                builder = RecordBuilder(prompt=q_match.group(2).strip())
                continue

            # ─── 3. Lettered option fills a slot ───
            opt_match = OPTION_PATTERN.match(line_str)
            if opt_match and builder is not None:
                slot = letter_to_slot(opt_match.group(1))
                if slot is not None:
                    builder.set_option(slot, opt_match.group(2).strip())
                continue

            # ─── 4. Anything else is ignored ───

        if builder is not None:
            self._finalize(builder, records)

        return records

    def _finalize(self, builder: RecordBuilder, records: list[QuestionRecord]):
        """Append a complete block; drop an incomplete one."""
        if not builder.is_complete:
            logger.debug(
                f"Dropping incomplete block ({builder.filled} options): "
                f"{builder.prompt[:40]!r}"
            )
            return

        record = builder.build(ordinal=len(records))
        logger.debug(f"Finalized question {record.ordinal}")
        records.append(record)
