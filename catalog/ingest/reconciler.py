"""
Reconcile normalized catalog rows with the database.

Phase 1 makes sure every department named in the file exists as a specialization of
the target program. Phase 2 walks the rows in file order, resolves each subject by slug
and links it to the row's specializations for the row's semester.

Nothing is updated or deleted: existing rows always win. Each operation is tried once;
failures are logged and counted, and the import moves on to the next item.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from catalog.core.slug import slugify

from .schemas import CatalogRow
from .store import CatalogStore
from .summary import ImportSummary

logger = logging.getLogger(__name__)


def collect_departments(rows: Iterable[CatalogRow]) -> List[str]:
    names = set()
    for row in rows:
        names.update(row.departments)
    return sorted(names)


def _describe_error(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class CatalogReconciler:
    def __init__(
        self,
        store: CatalogStore,
        program_id: UUID,
        summary: Optional[ImportSummary] = None,
    ) -> None:
        self.store = store
        self.program_id = program_id
        self.summary = summary if summary is not None else ImportSummary()
        # In-run identity caches
        self._specialization_ids: Dict[str, UUID] = {}
        self._subject_ids: Dict[str, UUID] = {}

    async def reconcile(self, rows: Sequence[CatalogRow]) -> ImportSummary:
        await self.sync_specializations(rows)
        await self.sync_subjects(rows)
        return self.summary

    async def sync_specializations(self, rows: Sequence[CatalogRow]) -> Dict[str, UUID]:
        departments = collect_departments(rows)
        self.summary.departments_found = len(departments)
        logger.info("Found %d unique departments: %s", len(departments), departments)

        for dept in departments:
            slug = slugify(dept)
            if not slug:
                # Names without ASCII letters or digits would all share the empty slug
                self.summary.specializations_failed += 1
                logger.warning("Skipping department %r: name does not produce a slug", dept)
                continue
            try:
                spec_id, created = await self.store.get_or_create_specialization(
                    self.program_id, dept, slug
                )
            except SQLAlchemyError as e:
                await self.store.rollback()
                self.summary.specializations_failed += 1
                logger.error("Error creating specialization %r (slug=%s): %s", dept, slug, _describe_error(e))
                continue
            self._specialization_ids[dept] = spec_id
            if created:
                self.summary.specializations_created += 1
                logger.info("Created specialization: %s (%s)", dept, spec_id)
            else:
                self.summary.specializations_existing += 1
                logger.info("Specialization %r already exists (%s)", dept, spec_id)
        return dict(self._specialization_ids)

    async def sync_subjects(self, rows: Sequence[CatalogRow]) -> None:
        for row in rows:
            if row.semester <= 0:
                self.summary.rows_rejected += 1
                logger.warning("Skipping row with invalid semester: %r (subject %s)", row.semester_label, row.slug)
                continue

            subject_id = await self._resolve_subject(row)
            if subject_id is None:
                continue

            for dept in row.departments:
                await self._link(subject_id, row, dept)

    async def _resolve_subject(self, row: CatalogRow) -> Optional[UUID]:
        cached = self._subject_ids.get(row.slug)
        if cached is not None:
            self.summary.subjects_skipped += 1
            return cached

        try:
            subject_id, created = await self.store.get_or_create_subject(
                slug=row.slug,
                code=row.subject_code,
                name=row.name,
                theory_credits=row.theory_credits,
                practical_credits=row.practical_credits,
                syllabus=row.syllabus,
                practical_topics=row.practical_topics,
            )
        except SQLAlchemyError as e:
            await self.store.rollback()
            self.summary.subjects_failed += 1
            logger.error(
                "Error creating subject %r: %s (code=%s, slug=%s, semester=%d)",
                row.name,
                _describe_error(e),
                row.subject_code,
                row.slug,
                row.semester,
            )
            return None

        self._subject_ids[row.slug] = subject_id
        if created:
            self.summary.subjects_created += 1
            logger.info("Created subject: %s (%s)", row.name, row.slug)
        else:
            self.summary.subjects_skipped += 1
            logger.debug("Subject %s already exists (%s)", row.slug, subject_id)
        return subject_id

    async def _link(self, subject_id: UUID, row: CatalogRow, dept: str) -> None:
        spec_id = self._specialization_ids.get(dept)
        if spec_id is None:
            logger.warning("Specialization not found for department: %s (subject %s)", dept, row.slug)
            return

        try:
            if await self.store.link_exists(subject_id, spec_id, row.semester):
                self.summary.links_skipped += 1
                return
            created = await self.store.create_link(subject_id, spec_id, row.semester)
        except SQLAlchemyError as e:
            await self.store.rollback()
            self.summary.links_skipped += 1
            logger.error(
                "Error linking subject %s to specialization %r (semester %d): %s",
                row.slug,
                dept,
                row.semester,
                _describe_error(e),
            )
            return

        if created:
            self.summary.links_created += 1
        else:
            self.summary.links_skipped += 1
