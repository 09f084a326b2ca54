import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from catalog.core.enums import ResourceType, StorageType
from catalog.db.session import Base


class StudyResource(Base):
    """Notes, previous-year papers, books or practical files attached to a subject."""

    __tablename__ = "study_resources"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    subject_id = Column(Uuid(as_uuid=True), ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False)
    type = Column(
        Enum(ResourceType, name="resource_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    storage_type = Column(
        Enum(StorageType, name="storage_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    link = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    subject = relationship("Subject", backref="study_resources")
