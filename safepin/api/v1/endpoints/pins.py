# safepin/api/v1/endpoints/pins.py
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from safepin.core.catalogue import LocationType, SafetyCategory
from safepin.core.security import get_current_student
from safepin.db.session import get_db
from safepin.models.student import Student
from safepin.schemas.safety_pin import (
    PinCreate,
    PinEnvelope,
    PinList,
    PinPublic,
)
from safepin.services import pin_service

router = APIRouter(prefix="/pins", tags=["pins"])


@router.get("", response_model=PinList)
def list_pins(
    class_id: uuid.UUID,
    student_id: Optional[uuid.UUID] = None,
    location_type: Optional[LocationType] = None,
    category: Optional[SafetyCategory] = None,
    db: Session = Depends(get_db),
):
    pins = pin_service.list_pins(
        db,
        class_id=class_id,
        student_id=student_id,
        location_type=location_type,
        category=category,
    )
    return PinList(pins=[PinPublic.model_validate(p) for p in pins])


@router.post("", response_model=PinEnvelope, status_code=status.HTTP_201_CREATED)
def create_pin(
    obj_in: PinCreate,
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    pin = pin_service.create_pin(db, student=current_student, obj_in=obj_in)
    return PinEnvelope(pin=PinPublic.model_validate(pin))


@router.get("/{pin_id}", response_model=PinEnvelope)
def get_pin(pin_id: uuid.UUID, db: Session = Depends(get_db)):
    pin = pin_service.get_pin(db, pin_id)
    return PinEnvelope(pin=PinPublic.model_validate(pin))
