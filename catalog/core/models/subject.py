"""Subjects (courses). Global entity identified by slug, not owned by a program."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Integer, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB

from catalog.db.session import Base

# jsonb on Postgres, plain JSON elsewhere (SQLite in tests)
JSONColumn = JSON().with_variant(JSONB(), "postgresql")


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(Text, nullable=False)  # CS301
    name = Column(Text, nullable=False)  # Data Structures
    slug = Column(Text, nullable=False, unique=True)
    theory_credits = Column(Integer, nullable=False, default=0)
    practical_credits = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    syllabus = Column(JSONColumn, nullable=True)
    practical_topics = Column(JSONColumn, nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
