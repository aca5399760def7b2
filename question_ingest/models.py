"""
Data Models
===========
Pydantic models for parsed question records and ingestion results.
All models are serializable to JSON for downstream storage and paper building.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ─── Enums ────────────────────────────────────────────────────────────────────


class OptionSlot(IntEnum):
    """Position of an option within a question (0=A ... 3=D)."""
    A = 0
    B = 1
    C = 2
    D = 3


class SourceFormat(str, Enum):
    """Input format as sniffed from raw text."""
    CSV = "csv"
    PLAIN_TEXT = "plain_text"
    UNKNOWN = "unknown"


class EmptyReason(str, Enum):
    """Why an ingestion run produced no records."""
    EMPTY_INPUT = "empty_input"
    NO_COMPLETE_QUESTIONS = "no_complete_questions"


# ─── Question Model ──────────────────────────────────────────────────────────


class QuestionRecord(BaseModel):
    """
    A finalized four-option question.

    The parser only fills ordinal, prompt and the four options; the remaining
    attributes belong to the storage layer and keep their defaults here.
    """
    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(ge=0)
    prompt: str
    option_a: str = ""
    option_b: str = ""
    option_c: str = ""
    option_d: str = ""

    correct_answer: int = Field(default=0, ge=0, le=3)
    difficulty: int = Field(default=1, ge=1, le=3)
    subject: str = ""
    chapter: str = ""
    is_selected: bool = False
    is_custom: bool = False

    @property
    def options(self) -> list[str]:
        return [self.option_a, self.option_b, self.option_c, self.option_d]

    def get_option(self, slot: int) -> str:
        """Option text for a slot index, or empty text if out of range."""
        if not 0 <= slot < len(OptionSlot):
            return ""
        return self.options[slot]

    def is_correct(self, slot: int) -> bool:
        return self.correct_answer == slot


# ─── Ingestion Result ────────────────────────────────────────────────────────


class IngestResult(BaseModel):
    """
    Complete output of one ingestion run.

    An empty ``records`` list is the only failure signal; ``empty_reason``
    tells the caller which message to show.
    """
    detected_format: SourceFormat
    parsed_as: SourceFormat
    records: list[QuestionRecord] = Field(default_factory=list)
    empty_reason: Optional[EmptyReason] = None

    @computed_field
    @property
    def record_count(self) -> int:
        return len(self.records)

    @computed_field
    @property
    def is_empty(self) -> bool:
        return not self.records
