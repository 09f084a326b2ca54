import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from catalog.db.session import Base


class Specialization(Base):
    """Named track within a program (e.g. Computer Science). Slug is unique per program."""

    __tablename__ = "specializations"
    __table_args__ = (
        UniqueConstraint("program_id", "slug", name="uq_specialization_program_slug"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    program_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("programs.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    program = relationship("Program", backref="specializations")
