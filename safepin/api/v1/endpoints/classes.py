# safepin/api/v1/endpoints/classes.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from safepin.core.security import get_current_teacher
from safepin.db.session import get_db
from safepin.models.teacher import Teacher
from safepin.schemas.classroom import (
    ClassCreate,
    ClassEnvelope,
    ClassList,
    ClassPublic,
)
from safepin.services import class_service

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=ClassList)
def list_classes(
    db: Session = Depends(get_db),
    current_teacher: Teacher = Depends(get_current_teacher),
):
    """The logged-in teacher's classes with their join PINs, newest first."""
    classes = class_service.list_classes(db, teacher=current_teacher)
    return ClassList(classes=[ClassPublic.model_validate(c) for c in classes])


@router.post("", response_model=ClassEnvelope, status_code=status.HTTP_201_CREATED)
def create_class(
    obj_in: ClassCreate,
    db: Session = Depends(get_db),
    current_teacher: Teacher = Depends(get_current_teacher),
):
    """
    Teacher creates a class; the 4-digit join PIN is generated here.
    """
    classroom = class_service.create_class(db, name=obj_in.name, teacher=current_teacher)
    return ClassEnvelope(class_=ClassPublic.model_validate(classroom))
