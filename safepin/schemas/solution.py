# safepin/schemas/solution.py
import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from safepin.core.catalogue import SolutionType
from safepin.schemas.student import StudentBrief


class SolutionCreate(BaseModel):
    safety_pin_id: uuid.UUID
    student_id: uuid.UUID
    type: SolutionType
    content: str


class SolutionPublic(BaseModel):
    id: uuid.UUID
    safety_pin_id: uuid.UUID
    student_id: uuid.UUID
    type: SolutionType
    content: str
    created_at: datetime | None = None

    students: StudentBrief | None = Field(default=None, validation_alias=AliasChoices("student", "students"))

    model_config = {"from_attributes": True}


class SolutionList(BaseModel):
    solutions: list[SolutionPublic]


class SolutionEnvelope(BaseModel):
    solution: SolutionPublic
