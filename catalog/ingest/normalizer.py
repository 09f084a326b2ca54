"""Turn split CSV fields into typed catalog rows."""

import json
import logging
import re
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from .parser import QUOTE, clean_field, split_fields
from .reassembler import MIN_RECORD_FIELDS, iter_logical_records
from .schemas import CatalogRow

logger = logging.getLogger(__name__)

EXPECTED_FIELDS = 19
# Anything shorter cannot carry the department column and is treated as garbage.
MIN_USABLE_FIELDS = 9

_LEADING_INT = re.compile(r"^\s*(\d+)")

# Column order of the export; positions 8 and 9 hold JSON.
COLUMNS: Tuple[str, ...] = (
    "semester",
    "subject",
    "subjectName",
    "theoryPaperCode",
    "labPaperCode",
    "theoryCredits",
    "labCredits",
    "departments",
    "theorySyllabus",
    "labExperiments",
    "notesCount",
    "pyqCount",
    "booksCount",
    "practicalsCount",
    "error",
    "notesFileIds",
    "pyqFileIds",
    "booksFileIds",
    "practicalsFileIds",
)


def parse_semester(label: str) -> int:
    """Ordinal label to number (3rd -> 3). Returns 0 when there are no leading digits."""
    match = _LEADING_INT.match(label or "")
    return int(match.group(1)) if match else 0


def parse_credits(value: str) -> int:
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0


def split_departments(value: str) -> Tuple[str, ...]:
    """Comma list -> unique trimmed names, first occurrence order kept."""
    names = (d.strip() for d in (value or "").split(","))
    return tuple(dict.fromkeys(n for n in names if n))


def parse_json_field(raw: str) -> Optional[Any]:
    """Parse a (possibly quote-wrapped) JSON column. Blank or invalid -> None."""
    if not raw or not raw.strip():
        return None
    text = raw.strip()
    if text.startswith(QUOTE):
        text = text[1:]
    if text.endswith(QUOTE):
        text = text[:-1]
    text = text.replace(QUOTE * 2, QUOTE)
    try:
        return json.loads(text)
    except ValueError:
        logger.warning("Failed to parse JSON field: %.50s...", raw)
        return None


def normalize_fields(fields: Sequence[str]) -> Optional[CatalogRow]:
    """
    Map raw fields (see COLUMNS) to a CatalogRow.

    Returns None for malformed rows and rows without a subject slug or name.
    Rows with an unparseable semester are returned with semester=0; the
    reconciler rejects them.
    """
    if len(fields) < MIN_USABLE_FIELDS:
        return None
    padded: List[str] = list(fields) + [""] * (EXPECTED_FIELDS - len(fields))

    slug = clean_field(padded[1])
    name = clean_field(padded[2])
    if not slug or not name:
        return None

    semester_label = clean_field(padded[0])
    return CatalogRow(
        semester=parse_semester(semester_label),
        semester_label=semester_label,
        slug=slug,
        name=name,
        theory_code=clean_field(padded[3]),
        lab_code=clean_field(padded[4]),
        theory_credits=parse_credits(clean_field(padded[5])),
        lab_credits=parse_credits(clean_field(padded[6])),
        departments=split_departments(clean_field(padded[7])),
        syllabus=parse_json_field(padded[8]),
        practical_topics=parse_json_field(padded[9]),
        notes_count=clean_field(padded[10]),
        pyq_count=clean_field(padded[11]),
        books_count=clean_field(padded[12]),
        practicals_count=clean_field(padded[13]),
        error=clean_field(padded[14]),
        notes_file_ids=clean_field(padded[15]),
        pyq_file_ids=clean_field(padded[16]),
        books_file_ids=clean_field(padded[17]),
        practicals_file_ids=clean_field(padded[18]),
    )


def read_catalog_rows(
    lines: Iterable[str],
    min_fields: int = MIN_RECORD_FIELDS,
    has_header: bool = True,
) -> Iterator[CatalogRow]:
    """Full text-to-rows pipeline: reassemble, split, normalize."""
    line_iter = iter(lines)
    if has_header:
        header = next(line_iter, None)
        if header is not None:
            names = tuple(clean_field(f) for f in split_fields(header.rstrip("\r\n")))
            if names[: len(COLUMNS)] != COLUMNS:
                logger.warning("Unexpected CSV header, reading columns by position: %s", ",".join(names))
    for record in iter_logical_records(line_iter, min_fields=min_fields):
        row = normalize_fields(split_fields(record))
        if row is not None:
            yield row
