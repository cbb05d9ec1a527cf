# safepin/services/solution_service.py
import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from safepin.core.catalogue import SolutionType
from safepin.core.exceptions import ForbiddenError, ValidationError
from safepin.models.solution import Solution
from safepin.models.student import Student
from safepin.schemas.solution import SolutionCreate
from safepin.services import pin_service

logger = logging.getLogger(__name__)


def create_solution(
    db: Session,
    *,
    student: Student,
    obj_in: SolutionCreate,
) -> Solution:
    """
    Append a solution to a pin. Image and drawing solutions carry the URL
    returned by the upload endpoint (drawings are rendered to an image
    client-side first).
    """
    if obj_in.student_id != student.id:
        raise ForbiddenError("Solutions can only be posted for your own session")

    content = obj_in.content.strip()
    if not content:
        raise ValidationError("Content is required")
    if obj_in.type != SolutionType.TEXT and not content.startswith(("http://", "https://")):
        raise ValidationError("Image and drawing solutions must reference an uploaded file URL")

    # raises NotFoundError for unknown pins
    pin_service.get_pin(db, obj_in.safety_pin_id)

    db_obj = Solution(
        safety_pin_id=obj_in.safety_pin_id,
        student_id=student.id,
        type=obj_in.type.value,
        content=content,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)

    logger.info("Student %s added %s solution to pin %s", student.id, db_obj.type, db_obj.safety_pin_id)
    return db_obj


def list_solutions(db: Session, *, safety_pin_id: uuid.UUID) -> List[Solution]:
    return (
        db.query(Solution)
        .filter(Solution.safety_pin_id == safety_pin_id)
        .order_by(Solution.created_at.desc())
        .all()
    )
