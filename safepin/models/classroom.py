# safepin/models/classroom.py
import uuid

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func
from safepin.db.base import Base, utcnow

class Classroom(Base):
    __tablename__ = "classes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # 4-digit join code; the unique index is what keeps PINs from colliding
    pin = Column(String(4), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
