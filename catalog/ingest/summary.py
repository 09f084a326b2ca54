from dataclasses import dataclass
from typing import List


@dataclass
class ImportSummary:
    """Counters collected while importing a catalog file. Informational only."""

    rows_parsed: int = 0
    rows_rejected: int = 0
    departments_found: int = 0
    specializations_created: int = 0
    specializations_existing: int = 0
    specializations_failed: int = 0
    subjects_created: int = 0
    subjects_skipped: int = 0
    subjects_failed: int = 0
    links_created: int = 0
    links_skipped: int = 0

    def render(self) -> str:
        lines: List[str] = [
            "=" * 60,
            "Import Summary",
            "=" * 60,
            f"Rows parsed: {self.rows_parsed}",
            f"Rows rejected (invalid semester): {self.rows_rejected}",
            "",
            f"Specializations: {self.departments_found} unique departments",
            f"   created: {self.specializations_created}",
            f"   already existed: {self.specializations_existing}",
            f"   failed: {self.specializations_failed}",
            "",
            f"Subjects created: {self.subjects_created}",
            f"Subjects skipped (already exist): {self.subjects_skipped}",
            f"Subjects failed: {self.subjects_failed}",
            "",
            f"Subject-Specialization links created: {self.links_created}",
            f"Links skipped (already exist): {self.links_skipped}",
            "=" * 60,
        ]
        return "\n".join(lines)
