# safepin/api/v1/endpoints/feedback.py
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from safepin.core.security import get_current_teacher
from safepin.db.session import get_db
from safepin.models.teacher import Teacher
from safepin.schemas.feedback import (
    FeedbackEnvelope,
    FeedbackList,
    FeedbackPublic,
    FeedbackUpsert,
)
from safepin.services import feedback_service

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.get("", response_model=FeedbackList)
def get_feedback(safety_pin_id: uuid.UUID, db: Session = Depends(get_db)):
    rows = [
        FeedbackPublic.model_validate(f)
        for f in feedback_service.list_feedback(db, safety_pin_id=safety_pin_id)
    ]
    return FeedbackList(feedbacks=rows, feedback=rows[0] if rows else None)


@router.post("", response_model=FeedbackEnvelope)
def upsert_feedback(
    obj_in: FeedbackUpsert,
    db: Session = Depends(get_db),
    current_teacher: Teacher = Depends(get_current_teacher),
):
    """
    Teacher writes or rewrites their feedback on a pin.
    """
    row = feedback_service.upsert_feedback(
        db,
        teacher=current_teacher,
        safety_pin_id=obj_in.safety_pin_id,
        text=obj_in.feedback,
    )
    return FeedbackEnvelope(feedback=FeedbackPublic.model_validate(row))
