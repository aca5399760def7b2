"""
Format Detector
===============
Best-effort sniffing of raw text into CSV or plain-text question blocks.
"""

from __future__ import annotations

import logging

from .models import SourceFormat
from .state_machine import QUESTION_PATTERN

logger = logging.getLogger(__name__)


def detect(text: str) -> SourceFormat:
    """
    Classify raw text.

    A doubled delimiter anywhere, or a comma on the first line, means CSV.
    Otherwise any numbered question line means plain text. A plain-text
    file whose first prompt contains a comma is routed to CSV; callers get
    an empty result in that case, never an exception.
    """
    lines = text.splitlines()
    first_line = lines[0] if lines else ""

    if ",," in text or "," in first_line:
        return SourceFormat.CSV

    if any(QUESTION_PATTERN.match(line.strip()) for line in lines):
        return SourceFormat.PLAIN_TEXT

    logger.debug("No CSV delimiters or numbered questions found")
    return SourceFormat.UNKNOWN
