# safepin/services/pin_service.py
import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from safepin.core.catalogue import LocationType, SafetyCategory
from safepin.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from safepin.models.safety_pin import SafetyPin
from safepin.models.student import Student
from safepin.schemas.safety_pin import PinCreate

logger = logging.getLogger(__name__)


def create_pin(
    db: Session,
    *,
    student: Student,
    obj_in: PinCreate,
) -> SafetyPin:
    """
    Student reports a safety pin.

    Village pins must carry coordinates; for school and home the coordinates
    and address are always stored as null, whatever the client sent.
    """
    if obj_in.class_id != student.class_id or obj_in.student_id != student.id:
        raise ForbiddenError("Pins can only be created for your own session")

    title = obj_in.title.strip()
    if not title:
        raise ValidationError("Title is required")

    is_village = obj_in.location_type == LocationType.VILLAGE
    if is_village and (obj_in.latitude is None or obj_in.longitude is None):
        raise ValidationError("Village pins need a location on the map")

    db_obj = SafetyPin(
        class_id=obj_in.class_id,
        student_id=obj_in.student_id,
        location_type=obj_in.location_type.value,
        category=obj_in.category.value,
        title=title,
        description=(obj_in.description or "").strip(),
        latitude=obj_in.latitude if is_village else None,
        longitude=obj_in.longitude if is_village else None,
        address=obj_in.address if is_village else None,
        image_url=obj_in.image_url or "",
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info("Student %s created pin %s in class %s", student.id, db_obj.id, db_obj.class_id)
    return db_obj


def list_pins(
    db: Session,
    *,
    class_id: uuid.UUID,
    student_id: Optional[uuid.UUID] = None,
    location_type: Optional[LocationType] = None,
    category: Optional[SafetyCategory] = None,
) -> List[SafetyPin]:
    """
    All pins of a class, newest first, optionally narrowed by reporter,
    location type and category. No paging.
    """
    query = db.query(SafetyPin).filter(SafetyPin.class_id == class_id)
    if student_id is not None:
        query = query.filter(SafetyPin.student_id == student_id)
    if location_type is not None:
        query = query.filter(SafetyPin.location_type == location_type.value)
    if category is not None:
        query = query.filter(SafetyPin.category == category.value)
    return query.order_by(SafetyPin.created_at.desc()).all()


def get_pin(db: Session, pin_id: uuid.UUID) -> SafetyPin:
    pin = db.get(SafetyPin, pin_id)
    if pin is None:
        raise NotFoundError("Safety pin not found")
    return pin
