from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field


class CatalogRow(BaseModel):
    """One normalized row of the catalog CSV."""

    semester: int = Field(..., description="Parsed semester number; 0 when the label had no leading digits")
    semester_label: str = ""
    slug: str
    name: str
    theory_code: str = ""
    lab_code: str = ""
    theory_credits: int = 0
    lab_credits: int = 0
    departments: Tuple[str, ...] = ()
    syllabus: Optional[Any] = None
    practical_topics: Optional[Any] = None

    # Resource columns, carried through but not reconciled
    notes_count: str = ""
    pyq_count: str = ""
    books_count: str = ""
    practicals_count: str = ""
    error: str = ""
    notes_file_ids: str = ""
    pyq_file_ids: str = ""
    books_file_ids: str = ""
    practicals_file_ids: str = ""

    @property
    def subject_code(self) -> str:
        return self.theory_code or self.slug

    @property
    def practical_credits(self) -> Optional[int]:
        return self.lab_credits if self.lab_credits > 0 else None
