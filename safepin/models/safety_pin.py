# safepin/models/safety_pin.py
import uuid

from sqlalchemy import Column, String, Text, DateTime, Float, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from safepin.db.base import Base, utcnow

class SafetyPin(Base):
    __tablename__ = "safety_pins"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    class_id = Column(Uuid, ForeignKey("classes.id"), nullable=False, index=True)
    student_id = Column(Uuid, ForeignKey("students.id"), nullable=False, index=True)

    # school / home / village
    location_type = Column(String(20), nullable=False, index=True)
    category = Column(String(40), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    # only set for village pins
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    address = Column(String(255), nullable=True)

    image_url = Column(String(1024), nullable=False, default="")

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    student = relationship("Student", lazy="joined")
