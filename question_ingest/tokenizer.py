"""
CSV Line Tokenizer
==================
Splits a single line of comma-separated text into fields.

Quoted fields may contain commas, and a doubled quote inside a quoted field
is a literal quote character. Malformed quoting never raises: an unterminated
quote simply runs to the end of the line and the partial field is flushed.
"""

from __future__ import annotations

QUOTE = '"'
DELIMITER = ","


def tokenize(line: str) -> list[str]:
    """
    Tokenize one CSV line.

    Args:
        line: A single line of text (no line terminator).

    Returns:
        Ordered list of fields. Always contains at least one (possibly empty)
        field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        c = line[i]
        if c == QUOTE:
            if in_quotes and i + 1 < len(line) and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(c)
        i += 1

    fields.append("".join(current))
    return fields
