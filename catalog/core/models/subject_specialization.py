"""Subject–specialization mapping per semester. Which subjects are taught in which specialization, and when."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from catalog.db.session import Base


class SubjectSpecialization(Base):
    __tablename__ = "subject_specializations"
    __table_args__ = (
        UniqueConstraint(
            "subject_id", "specialization_id", "semester",
            name="uq_subject_specializations_subject_spec_semester",
        ),
        CheckConstraint("semester > 0", name="ck_subject_specializations_semester_positive"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    subject_id = Column(Uuid(as_uuid=True), ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False)
    specialization_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("specializations.id", ondelete="CASCADE"),
        nullable=False,
    )
    semester = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    subject = relationship("Subject")
    specialization = relationship("Specialization")
