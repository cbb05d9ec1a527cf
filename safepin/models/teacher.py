# safepin/models/teacher.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from safepin.db.base import Base, utcnow

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
