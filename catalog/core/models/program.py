"""Degree programs (e.g. B.Tech, BCA) offered by a university."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from catalog.db.session import Base


class Program(Base):
    __tablename__ = "programs"
    __table_args__ = (
        UniqueConstraint("university_id", "slug", name="uq_program_university_slug"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    university_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("universities.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    has_specialization = Column(Boolean, nullable=False, default=False)
    semester_count = Column(Integer, nullable=False, default=8)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    university = relationship("University", backref="programs")
