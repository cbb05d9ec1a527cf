# safepin/services/class_service.py
import logging
import random
import uuid
from typing import Callable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from safepin.core.config import settings
from safepin.core.exceptions import PinGenerationError, UpstreamError, ValidationError
from safepin.models.classroom import Classroom
from safepin.models.teacher import Teacher

logger = logging.getLogger(__name__)

PIN_INDEX = "ix_classes_pin"


def generate_pin() -> str:
    """Random 4-digit join code, 1000-9999."""
    return str(random.randint(1000, 9999))


def is_pin_conflict(exc: IntegrityError) -> bool:
    """True when the violated constraint is the unique index on ``classes.pin``."""
    # psycopg2 names the constraint; SQLite only reports the column
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if constraint:
        return constraint == PIN_INDEX
    message = str(exc.orig)
    return PIN_INDEX in message or "classes.pin" in message


def create_class(
    db: Session,
    *,
    name: str,
    teacher: Optional[Teacher] = None,
    pin_generator: Optional[Callable[[], str]] = None,
) -> Classroom:
    """
    Create a class with a fresh PIN.

    The unique index on ``classes.pin`` decides collisions: a conflicting
    insert is rolled back and retried with a new candidate, at most
    PIN_MAX_ATTEMPTS times. Any other integrity failure is not retried.
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Class name is required")

    pin_generator = pin_generator or generate_pin
    for attempt in range(1, settings.PIN_MAX_ATTEMPTS + 1):
        db_obj = Classroom(
            pin=pin_generator(),
            name=name,
            teacher_id=teacher.id if teacher is not None else None,
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if not is_pin_conflict(e):
                logger.error("Creating class %s failed: %s", name, e.orig)
                raise UpstreamError(f"Database error: {e.orig}")
            logger.warning("PIN %s already taken (attempt %d)", db_obj.pin, attempt)
            continue

        db.refresh(db_obj)
        logger.info("Created class %s (%s) with PIN %s", db_obj.id, name, db_obj.pin)
        return db_obj

    logger.error("Gave up generating a class PIN after %d attempts", settings.PIN_MAX_ATTEMPTS)
    raise PinGenerationError("Failed to generate a unique PIN, please try again")


def list_classes(db: Session, *, teacher: Teacher) -> List[Classroom]:
    return (
        db.query(Classroom)
        .filter(Classroom.teacher_id == teacher.id)
        .order_by(Classroom.created_at.desc())
        .all()
    )


def get_class(db: Session, class_id: uuid.UUID) -> Optional[Classroom]:
    return db.get(Classroom, class_id)


def get_class_by_pin(db: Session, pin: str) -> Optional[Classroom]:
    return db.query(Classroom).filter(Classroom.pin == pin).first()
