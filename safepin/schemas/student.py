# safepin/schemas/student.py
"""
Student join handshake. The browser talks camelCase here, so the fields
carry aliases; both spellings are accepted on input.
"""
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class JoinRequest(BaseModel):
    step: str | None = None
    # numeric form fields may arrive as JSON numbers
    pin: str | int | None = None
    class_id: str | int | None = Field(default=None, alias="classId")
    name: str | None = None
    join_ticket: str | None = Field(default=None, alias="joinTicket")

    model_config = ConfigDict(populate_by_name=True)


class JoinPinResponse(BaseModel):
    """Phase 1: the class behind the PIN plus a ticket for phase 2."""
    class_id: uuid.UUID = Field(alias="classId")
    class_name: str = Field(alias="className")
    join_ticket: str = Field(alias="joinTicket")

    model_config = ConfigDict(populate_by_name=True)


class JoinNameResponse(BaseModel):
    """Phase 2: the new student and the session token the client keeps."""
    student_id: uuid.UUID = Field(alias="studentId")
    session_id: str = Field(alias="sessionId")
    class_id: uuid.UUID = Field(alias="classId")
    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="bearer", alias="tokenType")

    model_config = ConfigDict(populate_by_name=True)


class StudentBrief(BaseModel):
    name: str

    model_config = {"from_attributes": True}


class StudentPublic(BaseModel):
    id: uuid.UUID
    class_id: uuid.UUID
    name: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ClassBrief(BaseModel):
    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True}


class StudentMe(BaseModel):
    student: StudentPublic
    class_: ClassBrief = Field(alias="class")

    model_config = ConfigDict(populate_by_name=True)
