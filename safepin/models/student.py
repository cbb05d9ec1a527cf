# safepin/models/student.py
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from safepin.db.base import Base, utcnow

class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    class_id = Column(Uuid, ForeignKey("classes.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)  # display name, not unique
    session_id = Column(String(64), nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    classroom = relationship("Classroom")
