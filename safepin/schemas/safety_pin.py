# safepin/schemas/safety_pin.py
import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from safepin.core.catalogue import LocationType, SafetyCategory
from safepin.schemas.student import StudentBrief


class PinCreate(BaseModel):
    class_id: uuid.UUID
    student_id: uuid.UUID
    location_type: LocationType
    category: SafetyCategory
    title: str = Field(max_length=255)
    description: str | None = None

    # required for village pins, ignored otherwise
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    address: str | None = Field(default=None, max_length=255)

    image_url: str | None = Field(default=None, max_length=1024)


class PinPublic(BaseModel):
    id: uuid.UUID
    class_id: uuid.UUID
    student_id: uuid.UUID
    location_type: LocationType
    category: SafetyCategory
    title: str
    description: str
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    image_url: str
    created_at: datetime | None = None

    # reporter's display name, read from the ``student`` relationship
    students: StudentBrief | None = Field(default=None, validation_alias=AliasChoices("student", "students"))

    model_config = {"from_attributes": True}


class PinList(BaseModel):
    pins: list[PinPublic]


class PinEnvelope(BaseModel):
    pin: PinPublic
