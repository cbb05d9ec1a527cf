# safepin/core/security.py
"""
Password hashing for teacher accounts and the three kinds of signed tokens
the API hands out:

- ``teacher``: teacher access token, issued at login
- ``join``: short-lived ticket proving a student entered a valid class PIN
- ``student``: student session token, issued when the student joins

All tokens are HS256 JWTs carrying a ``typ`` claim; a token of the wrong
kind is rejected like a forged one.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from safepin.core.config import settings
from safepin.core.exceptions import AuthError
from safepin.db.session import get_db
from safepin.models.student import Student
from safepin.models.teacher import Teacher

TEACHER_TOKEN = "teacher"
STUDENT_TOKEN = "student"
JOIN_TICKET = "join"

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Creates a signed JWT; ``data`` must already carry ``sub`` and ``typ``."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str, expected_type: str | None = None) -> dict[str, Any]:
    """Verifies signature and expiry; raises AuthError on any failure."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthError("Invalid or expired token")

    if expected_type is not None and payload.get("typ") != expected_type:
        raise AuthError("Invalid or expired token")
    if not payload.get("sub"):
        raise AuthError("Invalid or expired token")
    return payload


def authenticate_teacher(db: Session, email: str, password: str) -> Teacher | None:
    teacher = db.query(Teacher).filter(Teacher.email == email).first()
    if teacher is None or not verify_password(password, teacher.password_hash):
        return None
    return teacher


def create_teacher_token(teacher: Teacher) -> str:
    return create_access_token(
        {"sub": str(teacher.id), "typ": TEACHER_TOKEN},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_student_token(student: Student) -> str:
    return create_access_token(
        {
            "sub": str(student.id),
            "cls": str(student.class_id),
            "sid": student.session_id,
            "typ": STUDENT_TOKEN,
        },
        expires_delta=timedelta(minutes=settings.STUDENT_TOKEN_EXPIRE_MINUTES),
    )


def create_join_ticket(class_id: uuid.UUID) -> str:
    return create_access_token(
        {"sub": str(class_id), "typ": JOIN_TICKET},
        expires_delta=timedelta(minutes=settings.JOIN_TICKET_EXPIRE_MINUTES),
    )


def read_join_ticket(ticket: str) -> uuid.UUID:
    payload = decode_token(ticket, JOIN_TICKET)
    try:
        return uuid.UUID(payload["sub"])
    except ValueError:
        raise AuthError("Invalid or expired token")


def _teacher_from_payload(db: Session, payload: dict[str, Any]) -> Teacher:
    try:
        teacher_id = int(payload["sub"])
    except ValueError:
        raise AuthError("Invalid or expired token")
    teacher = db.get(Teacher, teacher_id)
    if teacher is None:
        raise AuthError("Teacher account no longer exists")
    return teacher


def _student_from_payload(db: Session, payload: dict[str, Any]) -> Student:
    try:
        student_id = uuid.UUID(payload["sub"])
    except ValueError:
        raise AuthError("Invalid or expired token")
    student = db.get(Student, student_id)
    # token must still match the row it was issued for
    if (
        student is None
        or student.session_id != payload.get("sid")
        or str(student.class_id) != payload.get("cls")
    ):
        raise AuthError("Student session is no longer valid")
    return student


def get_current_teacher(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Teacher:
    if not token:
        raise AuthError("Teacher login required")
    return _teacher_from_payload(db, decode_token(token, TEACHER_TOKEN))


def get_current_student(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Student:
    if not token:
        raise AuthError("Student session required")
    return _student_from_payload(db, decode_token(token, STUDENT_TOKEN))


def get_current_caller(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Teacher | Student:
    """Accepts either a teacher or a student token."""
    if not token:
        raise AuthError("Login required")
    payload = decode_token(token)
    if payload.get("typ") == TEACHER_TOKEN:
        return _teacher_from_payload(db, payload)
    if payload.get("typ") == STUDENT_TOKEN:
        return _student_from_payload(db, payload)
    raise AuthError("Invalid or expired token")
