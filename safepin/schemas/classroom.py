# safepin/schemas/classroom.py
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ClassCreate(BaseModel):
    name: str = Field(max_length=100)


class ClassPublic(BaseModel):
    id: uuid.UUID
    pin: str
    name: str
    teacher_id: int | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ClassList(BaseModel):
    classes: list[ClassPublic]


class ClassEnvelope(BaseModel):
    class_: ClassPublic = Field(alias="class")

    model_config = ConfigDict(populate_by_name=True)
