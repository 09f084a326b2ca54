"""
Field splitting for catalog CSV records.

A record is split on commas outside quoted sections. Quoted sections may hold commas,
newlines and doubled quotes (""), which is how the syllabus JSON columns arrive.
"""

from typing import List

QUOTE = '"'
DELIMITER = ","
_BLANKS = (" ", "\t")


def _closes_quoted_field(record: str, pos: int, delimiter: str) -> bool:
    """True when the quote at ``pos`` is followed (past blanks) by a delimiter or end of text."""
    j = pos + 1
    while j < len(record) and record[j] in _BLANKS:
        j += 1
    return j >= len(record) or record[j] == delimiter


def split_fields(record: str, delimiter: str = DELIMITER) -> List[str]:
    """
    Split one logical record into raw fields, keeping their quotes.

    Never raises on malformed quoting; an unterminated quote simply swallows the rest
    of the record into the last field. Callers validate the field count.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    n = len(record)

    while i < n:
        char = record[i]
        if char == QUOTE and not in_quotes:
            in_quotes = True
            current.append(char)
        elif char == QUOTE and i + 1 < n and record[i + 1] == QUOTE:
            # Escaped quote; both characters are kept for clean_field to collapse
            current.append(QUOTE * 2)
            i += 1
        elif char == QUOTE:
            if _closes_quoted_field(record, i, delimiter):
                in_quotes = False
            current.append(char)
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def clean_field(raw: str) -> str:
    """Trim, strip one layer of wrapping quotes and collapse doubled quotes."""
    cleaned = raw.strip()
    if len(cleaned) >= 2 and cleaned.startswith(QUOTE) and cleaned.endswith(QUOTE):
        cleaned = cleaned[1:-1]
    return cleaned.replace(QUOTE * 2, QUOTE)


def quote_field(value: str, delimiter: str = DELIMITER) -> str:
    """Serialize a value the way split_fields/clean_field read it back."""
    if any(c in value for c in (delimiter, QUOTE, "\n", "\r")):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value
