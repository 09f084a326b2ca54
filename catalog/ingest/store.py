"""
Storage operations used by the catalog importer.

Every create commits on its own so an interrupted import keeps what it already wrote
and can simply be re-run. Get-or-create tolerates a concurrent writer: a unique
violation on insert is rolled back and the row is looked up again.
"""

from typing import Any, Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.models import Specialization, Subject, SubjectSpecialization


class CatalogStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def rollback(self) -> None:
        """Discard a failed transaction so the session can be used for the next item."""
        await self.db.rollback()

    async def find_specialization_id(self, program_id: UUID, slug: str) -> Optional[UUID]:
        result = await self.db.execute(
            select(Specialization.id)
            .where(
                Specialization.program_id == program_id,
                Specialization.slug == slug,
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_or_create_specialization(
        self,
        program_id: UUID,
        name: str,
        slug: str,
    ) -> Tuple[UUID, bool]:
        """Return (id, created) for the specialization with this slug under the program."""
        existing = await self.find_specialization_id(program_id, slug)
        if existing is not None:
            return existing, False
        obj = Specialization(program_id=program_id, name=name, slug=slug)
        try:
            self.db.add(obj)
            await self.db.commit()
            return obj.id, True
        except IntegrityError:
            await self.db.rollback()
            existing = await self.find_specialization_id(program_id, slug)
            if existing is None:
                raise
            return existing, False

    async def find_subject_id(self, slug: str) -> Optional[UUID]:
        result = await self.db.execute(select(Subject.id).where(Subject.slug == slug).limit(1))
        return result.scalar_one_or_none()

    async def get_or_create_subject(
        self,
        slug: str,
        code: str,
        name: str,
        theory_credits: int,
        practical_credits: Optional[int] = None,
        syllabus: Optional[Any] = None,
        practical_topics: Optional[Any] = None,
    ) -> Tuple[UUID, bool]:
        """Return (id, created) for the subject with this slug. Existing subjects are never updated."""
        existing = await self.find_subject_id(slug)
        if existing is not None:
            return existing, False
        obj = Subject(
            code=code,
            name=name,
            slug=slug,
            theory_credits=theory_credits,
            practical_credits=practical_credits,
            syllabus=syllabus,
            practical_topics=practical_topics,
        )
        try:
            self.db.add(obj)
            await self.db.commit()
            return obj.id, True
        except IntegrityError:
            await self.db.rollback()
            existing = await self.find_subject_id(slug)
            if existing is None:
                raise
            return existing, False

    async def link_exists(self, subject_id: UUID, specialization_id: UUID, semester: int) -> bool:
        result = await self.db.execute(
            select(SubjectSpecialization.id)
            .where(
                SubjectSpecialization.subject_id == subject_id,
                SubjectSpecialization.specialization_id == specialization_id,
                SubjectSpecialization.semester == semester,
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def create_link(self, subject_id: UUID, specialization_id: UUID, semester: int) -> bool:
        """Insert the link; False when an identical link already exists."""
        try:
            self.db.add(
                SubjectSpecialization(
                    subject_id=subject_id,
                    specialization_id=specialization_id,
                    semester=semester,
                )
            )
            await self.db.commit()
            return True
        except IntegrityError:
            await self.db.rollback()
            if await self.link_exists(subject_id, specialization_id, semester):
                return False
            raise
