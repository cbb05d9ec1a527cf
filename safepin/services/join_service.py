# safepin/services/join_service.py
"""
Two-phase student join.

    awaiting_pin  --(valid PIN)-->  awaiting_name  --(name + ticket)-->  joined

Phase 1 hands back a short-lived signed join ticket bound to the class;
phase 2 only accepts a ticket for the class it names, so a client cannot
join a class it never entered the PIN for.
"""
import logging
import re
import uuid

from sqlalchemy.orm import Session

from safepin.core import security
from safepin.core.exceptions import AuthError, NotFoundError, ValidationError
from safepin.models.classroom import Classroom
from safepin.models.student import Student
from safepin.services import class_service

logger = logging.getLogger(__name__)

PIN_PATTERN = re.compile(r"[0-9]{4}")

STEP_PIN = "pin"
STEP_NAME = "name"


def generate_session_id() -> str:
    return uuid.uuid4().hex


def verify_pin(db: Session, pin: str | int | None) -> tuple[Classroom, str]:
    """Phase 1. Returns the class and a join ticket for phase 2."""
    pin = "" if pin is None else str(pin).strip()
    # format check happens before touching the database
    if not PIN_PATTERN.fullmatch(pin):
        raise ValidationError("PIN must be exactly 4 digits")

    classroom = class_service.get_class_by_pin(db, pin)
    if classroom is None:
        raise NotFoundError("No class matches this PIN")

    return classroom, security.create_join_ticket(classroom.id)


def register_student(
    db: Session,
    *,
    class_id: str | int | None,
    name: str | None,
    join_ticket: str | None,
) -> tuple[Student, str]:
    """Phase 2. Creates the student row and returns it with its session token."""
    class_id = "" if class_id is None else str(class_id).strip()
    name = (name or "").strip()
    if not class_id or not name:
        raise ValidationError("classId and name are required")
    try:
        class_uuid = uuid.UUID(class_id)
    except ValueError:
        raise ValidationError("classId is not a valid identifier")

    if not join_ticket:
        raise AuthError("Join ticket is required, enter the class PIN first")
    if security.read_join_ticket(join_ticket) != class_uuid:
        raise AuthError("Join ticket does not belong to this class")

    # the class may have been removed between the two phases
    classroom = class_service.get_class(db, class_uuid)
    if classroom is None:
        raise NotFoundError("Class not found")

    student = Student(
        class_id=classroom.id,
        name=name,
        session_id=generate_session_id(),
    )
    db.add(student)
    db.commit()
    db.refresh(student)

    logger.info("Student %s joined class %s", student.id, classroom.id)
    return student, security.create_student_token(student)
