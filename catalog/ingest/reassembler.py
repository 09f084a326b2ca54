"""
Rebuild logical CSV records from physical lines.

Syllabus and lab-experiment columns hold pretty-printed JSON, so one record can span
many physical lines. Lines are accumulated until a trial split yields enough fields and
the text does not stop inside a quoted field.

The completeness check sniffs the trailing quote rather than running a full
character-level state machine, so a quoted field that legitimately ends a physical
line with an escaped quote can close a record early.
"""

import logging
from typing import Iterable, Iterator

from .parser import QUOTE, split_fields

logger = logging.getLogger(__name__)

# 19 columns are expected; 18 tolerates a missing trailing empty column.
MIN_RECORD_FIELDS = 18


def _is_complete(text: str, min_fields: int) -> bool:
    fields = split_fields(text)
    if len(fields) < min_fields:
        return False
    trimmed = text.rstrip()
    if trimmed.endswith(QUOTE):
        return True
    return not fields[-1].startswith(QUOTE) and bool(trimmed)


def iter_logical_records(lines: Iterable[str], min_fields: int = MIN_RECORD_FIELDS) -> Iterator[str]:
    """
    Yield one string per logical record, newlines inside quoted fields preserved.

    A trailing partial record left at end of input is dropped with a warning.
    """
    pending = ""
    for line in lines:
        line = line.rstrip("\r\n")
        if not pending and not line.strip():
            continue
        pending = f"{pending}\n{line}" if pending else line
        if _is_complete(pending, min_fields):
            yield pending
            pending = ""

    if pending:
        logger.warning(
            "Discarding incomplete trailing record (%d chars): %.60r",
            len(pending),
            pending,
        )
