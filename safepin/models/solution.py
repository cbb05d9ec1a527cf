# safepin/models/solution.py
import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from safepin.db.base import Base, utcnow

class Solution(Base):
    __tablename__ = "solutions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    safety_pin_id = Column(Uuid, ForeignKey("safety_pins.id"), nullable=False, index=True)
    student_id = Column(Uuid, ForeignKey("students.id"), nullable=False, index=True)

    # text / image / drawing
    type = Column(String(20), nullable=False)
    # raw text, or the uploaded URL for image and drawing
    content = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    student = relationship("Student", lazy="joined")
