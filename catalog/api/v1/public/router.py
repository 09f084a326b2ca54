from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import ServiceError
from catalog.db.session import get_db

from .dependencies import check_origin
from .schemas import (
    ProgramResponse,
    SpecializationResponse,
    StudyResourceResponse,
    SubjectResponse,
    UniversityResponse,
)
from . import service

router = APIRouter(prefix="/api/public", tags=["public"], dependencies=[Depends(check_origin)])


@router.get("/universities", response_model=List[UniversityResponse])
async def list_universities(db: AsyncSession = Depends(get_db)):
    try:
        return await service.list_universities(db)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/programs", response_model=List[ProgramResponse])
async def list_programs(
    university_id: Optional[UUID] = Query(None, alias="universityId"),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await service.list_programs(db, university_id=university_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/specializations", response_model=List[SpecializationResponse])
async def list_specializations(
    program_id: Optional[UUID] = Query(None, alias="programId"),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await service.list_specializations(db, program_id=program_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/subjects", response_model=List[SubjectResponse])
async def list_subjects(
    specialization_id: Optional[UUID] = Query(None, alias="specializationId"),
    program_id: Optional[UUID] = Query(None, alias="programId"),
    semester: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Subjects, optionally narrowed to a specialization or program and a semester."""
    try:
        return await service.list_subjects(
            db,
            specialization_id=specialization_id,
            semester=semester,
            program_id=program_id,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/study-resources", response_model=List[StudyResourceResponse])
async def list_study_resources(
    subject_id: Optional[UUID] = Query(None, alias="subjectId"),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await service.list_study_resources(db, subject_id=subject_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
