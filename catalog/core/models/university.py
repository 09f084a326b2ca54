import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text, Uuid

from catalog.db.session import Base


class University(Base):
    __tablename__ = "universities"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, unique=True)
    slug = Column(String(255), nullable=False, unique=True)
    location = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
