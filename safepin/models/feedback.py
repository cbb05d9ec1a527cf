# safepin/models/feedback.py
import uuid

from sqlalchemy import (
    Column,
    Integer,
    Text,
    DateTime,
    ForeignKey,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.sql import func
from safepin.db.base import Base, utcnow

class TeacherFeedback(Base):
    __tablename__ = "teacher_feedbacks"
    __table_args__ = (
        UniqueConstraint("safety_pin_id", "teacher_id", name="uq_feedback_pin_teacher"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    safety_pin_id = Column(Uuid, ForeignKey("safety_pins.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)

    feedback = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )
