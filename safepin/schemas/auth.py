# safepin/schemas/auth.py
from datetime import datetime

from pydantic import BaseModel, EmailStr, ConfigDict, Field


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1, max_length=100)


class TeacherPublic(BaseModel):

    id: int
    email: EmailStr
    name: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
