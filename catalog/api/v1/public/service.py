from typing import List, Optional
from uuid import UUID

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import ServiceError
from catalog.core.models import (
    Program,
    Specialization,
    StudyResource,
    Subject,
    SubjectProgram,
    SubjectSpecialization,
    University,
)

from .schemas import (
    ProgramResponse,
    SpecializationResponse,
    StudyResourceResponse,
    SubjectResponse,
    UniversityResponse,
)


async def _fetch_all(db: AsyncSession, stmt, entity: str) -> list:
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError:
        raise ServiceError(f"Failed to fetch {entity}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return list(result.scalars().all())


async def list_universities(db: AsyncSession) -> List[UniversityResponse]:
    rows = await _fetch_all(db, select(University).order_by(University.name), "universities")
    return [UniversityResponse.model_validate(u) for u in rows]


async def list_programs(db: AsyncSession, university_id: Optional[UUID] = None) -> List[ProgramResponse]:
    stmt = select(Program)
    if university_id is not None:
        stmt = stmt.where(Program.university_id == university_id)
    rows = await _fetch_all(db, stmt.order_by(Program.name), "programs")
    return [ProgramResponse.model_validate(p) for p in rows]


async def list_specializations(
    db: AsyncSession,
    program_id: Optional[UUID] = None,
) -> List[SpecializationResponse]:
    stmt = select(Specialization)
    if program_id is not None:
        stmt = stmt.where(Specialization.program_id == program_id)
    rows = await _fetch_all(db, stmt.order_by(Specialization.name), "specializations")
    return [SpecializationResponse.model_validate(s) for s in rows]


async def list_subjects(
    db: AsyncSession,
    specialization_id: Optional[UUID] = None,
    semester: Optional[int] = None,
    program_id: Optional[UUID] = None,
) -> List[SubjectResponse]:
    """All subjects, or the ones linked to a specialization or program (optionally in one semester)."""
    stmt = select(Subject)
    if program_id is not None:
        program_filter = [SubjectProgram.program_id == program_id]
        if semester is not None:
            program_filter.append(SubjectProgram.semester == semester)
        stmt = stmt.where(Subject.id.in_(select(SubjectProgram.subject_id).where(*program_filter)))
    if specialization_id is not None or (semester is not None and program_id is None):
        link_filter = []
        if specialization_id is not None:
            link_filter.append(SubjectSpecialization.specialization_id == specialization_id)
        if semester is not None:
            link_filter.append(SubjectSpecialization.semester == semester)
        linked = select(SubjectSpecialization.subject_id).where(*link_filter)
        stmt = stmt.where(Subject.id.in_(linked))
    rows = await _fetch_all(db, stmt.order_by(Subject.code, Subject.name), "subjects")
    return [SubjectResponse.model_validate(s) for s in rows]


async def list_study_resources(
    db: AsyncSession,
    subject_id: Optional[UUID] = None,
) -> List[StudyResourceResponse]:
    stmt = select(StudyResource)
    if subject_id is not None:
        stmt = stmt.where(StudyResource.subject_id == subject_id)
    rows = await _fetch_all(db, stmt.order_by(StudyResource.created_at), "study resources")
    return [StudyResourceResponse.model_validate(r) for r in rows]
