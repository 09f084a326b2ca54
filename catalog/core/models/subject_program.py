"""Subject–program mapping per semester, for programs without specializations."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from catalog.db.session import Base


class SubjectProgram(Base):
    __tablename__ = "subject_programs"
    __table_args__ = (
        UniqueConstraint(
            "subject_id", "program_id", "semester",
            name="uq_subject_programs_subject_program_semester",
        ),
        CheckConstraint("semester > 0", name="ck_subject_programs_semester_positive"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    subject_id = Column(Uuid(as_uuid=True), ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False)
    program_id = Column(Uuid(as_uuid=True), ForeignKey("programs.id", ondelete="CASCADE"), nullable=False)
    semester = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    subject = relationship("Subject")
    program = relationship("Program")
