# safepin/api/v1/endpoints/student.py
from typing import Union

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from safepin.core.exceptions import ValidationError
from safepin.core.security import get_current_student
from safepin.db.session import get_db
from safepin.models.student import Student
from safepin.schemas.student import (
    ClassBrief,
    JoinNameResponse,
    JoinPinResponse,
    JoinRequest,
    StudentMe,
    StudentPublic,
)
from safepin.services import join_service

router = APIRouter(prefix="/student", tags=["student"])


@router.post("/join", response_model=Union[JoinPinResponse, JoinNameResponse])
def join_class(payload: JoinRequest, db: Session = Depends(get_db)):
    """
    Two-step join.

    - ``{"step": "pin", "pin": "4821"}`` -> ``{classId, className, joinTicket}``
    - ``{"step": "name", "classId": ..., "name": "Kim", "joinTicket": ...}``
      -> ``{studentId, sessionId, classId, accessToken, tokenType}``
    """
    if payload.step == join_service.STEP_PIN:
        classroom, ticket = join_service.verify_pin(db, payload.pin)
        return JoinPinResponse(
            class_id=classroom.id,
            class_name=classroom.name,
            join_ticket=ticket,
        )

    if payload.step == join_service.STEP_NAME:
        student, token = join_service.register_student(
            db,
            class_id=payload.class_id,
            name=payload.name,
            join_ticket=payload.join_ticket,
        )
        return JoinNameResponse(
            student_id=student.id,
            session_id=student.session_id,
            class_id=student.class_id,
            access_token=token,
        )

    raise ValidationError("step must be 'pin' or 'name'")


@router.get("/me", response_model=StudentMe)
def read_me(current_student: Student = Depends(get_current_student)):
    """Session check for student pages; 401 sends the client back to the join flow."""
    return StudentMe(
        student=StudentPublic.model_validate(current_student),
        class_=ClassBrief.model_validate(current_student.classroom),
    )
