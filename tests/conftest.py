import os
from typing import AsyncGenerator, List, Optional, Sequence

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.core.models import Program, University
from catalog.db.init_db import create_tables
from catalog.db.session import build_sessionmaker, get_db
from catalog.ingest.parser import quote_field
from catalog.main import app


TEST_DATABASE_URL = "sqlite+aiosqlite://"


def csv_line(
    semester: str,
    subject: str,
    name: str,
    departments: str,
    theory_code: str = "",
    lab_code: str = "",
    theory_credits: str = "3",
    lab_credits: str = "",
    syllabus: str = "",
    lab_experiments: str = "",
    extra: Optional[Sequence[str]] = None,
) -> str:
    """One 19-column catalog record, quoted the way the export quotes it."""
    values: List[str] = [
        semester,
        subject,
        name,
        theory_code,
        lab_code,
        theory_credits,
        lab_credits,
        departments,
        syllabus,
        lab_experiments,
    ]
    values += list(extra) if extra is not None else [""] * 9
    return ",".join(quote_field(v) for v in values)


CSV_HEADER = (
    "semester,subject,subjectName,theoryPaperCode,labPaperCode,theoryCredits,labCredits,"
    "departments,theorySyllabus,labExperiments,notesCount,pyqCount,booksCount,practicalsCount,"
    "error,notesFileIds,pyqFileIds,booksFileIds,practicalsFileIds"
)


@pytest.fixture()
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite shared by every session of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for a test and override FastAPI dependency."""
    async with build_sessionmaker(engine)() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db
        yield session

    app.dependency_overrides.clear()


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture()
async def program(db_session: AsyncSession) -> Program:
    university = University(name="Guru Gobind Singh Indraprastha University", slug="ggsipu", location="Delhi")
    db_session.add(university)
    await db_session.flush()
    program = Program(university_id=university.id, name="B.Tech", slug="btech", has_specialization=True)
    db_session.add(program)
    await db_session.commit()
    return program
