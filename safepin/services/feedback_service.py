# safepin/services/feedback_service.py
import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from safepin.core.exceptions import ValidationError
from safepin.db.base import utcnow
from safepin.models.feedback import TeacherFeedback
from safepin.models.teacher import Teacher
from safepin.services import pin_service

logger = logging.getLogger(__name__)


def list_feedback(db: Session, *, safety_pin_id: uuid.UUID) -> List[TeacherFeedback]:
    """Every teacher's feedback on a pin, newest first."""
    return (
        db.query(TeacherFeedback)
        .filter(TeacherFeedback.safety_pin_id == safety_pin_id)
        .order_by(TeacherFeedback.created_at.desc())
        .all()
    )


def find_feedback(
    db: Session, *, safety_pin_id: uuid.UUID, teacher_id: int
) -> Optional[TeacherFeedback]:
    return (
        db.query(TeacherFeedback)
        .filter(
            TeacherFeedback.safety_pin_id == safety_pin_id,
            TeacherFeedback.teacher_id == teacher_id,
        )
        .first()
    )


def _save_feedback(
    db: Session, *, teacher_id: int, safety_pin_id: uuid.UUID, text: str
) -> TeacherFeedback:
    existing = find_feedback(db, safety_pin_id=safety_pin_id, teacher_id=teacher_id)

    if existing is not None:
        existing.feedback = text
        existing.updated_at = utcnow()
        db_obj = existing
    else:
        db_obj = TeacherFeedback(
            safety_pin_id=safety_pin_id,
            teacher_id=teacher_id,
            feedback=text,
        )
        db.add(db_obj)

    db.commit()
    db.refresh(db_obj)
    return db_obj


def upsert_feedback(
    db: Session,
    *,
    teacher: Teacher,
    safety_pin_id: uuid.UUID,
    text: str,
) -> TeacherFeedback:
    """
    One feedback row per (pin, teacher): update the teacher's existing row
    if there is one, otherwise insert.

    Two concurrent first writes race on ``uq_feedback_pin_teacher``; the
    loser rolls back and updates the row the winner inserted.
    """
    text = (text or "").strip()
    if not text:
        raise ValidationError("Feedback text is required")

    pin_service.get_pin(db, safety_pin_id)

    teacher_id = teacher.id
    try:
        db_obj = _save_feedback(db, teacher_id=teacher_id, safety_pin_id=safety_pin_id, text=text)
    except IntegrityError:
        db.rollback()
        logger.warning(
            "Feedback on pin %s by teacher %s was written concurrently, retrying",
            safety_pin_id,
            teacher_id,
        )
        db_obj = _save_feedback(db, teacher_id=teacher_id, safety_pin_id=safety_pin_id, text=text)

    logger.info("Teacher %s saved feedback on pin %s", teacher_id, safety_pin_id)
    return db_obj
