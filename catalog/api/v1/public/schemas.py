from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel

from catalog.core.enums import ResourceType, StorageType


class UniversityResponse(BaseModel):
    id: UUID
    name: str
    slug: str
    location: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ProgramResponse(BaseModel):
    id: UUID
    university_id: UUID
    name: str
    slug: str
    has_specialization: bool
    semester_count: int
    created_at: datetime

    class Config:
        from_attributes = True


class SpecializationResponse(BaseModel):
    id: UUID
    program_id: UUID
    name: str
    slug: str
    created_at: datetime

    class Config:
        from_attributes = True


class SubjectResponse(BaseModel):
    id: UUID
    code: str
    name: str
    slug: str
    theory_credits: int
    practical_credits: Optional[int] = None
    description: Optional[str] = None
    syllabus: Optional[Any] = None
    practical_topics: Optional[Any] = None
    created_at: datetime

    class Config:
        from_attributes = True


class StudyResourceResponse(BaseModel):
    id: UUID
    subject_id: UUID
    type: ResourceType
    storage_type: StorageType
    link: str
    created_at: datetime

    class Config:
        from_attributes = True
