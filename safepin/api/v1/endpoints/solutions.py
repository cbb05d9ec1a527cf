# safepin/api/v1/endpoints/solutions.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from safepin.core.security import get_current_student
from safepin.db.session import get_db
from safepin.models.student import Student
from safepin.schemas.solution import (
    SolutionCreate,
    SolutionEnvelope,
    SolutionList,
    SolutionPublic,
)
from safepin.services import solution_service

router = APIRouter(prefix="/solutions", tags=["solutions"])


@router.get("", response_model=SolutionList)
def list_solutions(safety_pin_id: uuid.UUID, db: Session = Depends(get_db)):
    solutions = solution_service.list_solutions(db, safety_pin_id=safety_pin_id)
    return SolutionList(solutions=[SolutionPublic.model_validate(s) for s in solutions])


@router.post("", response_model=SolutionEnvelope, status_code=status.HTTP_201_CREATED)
def create_solution(
    obj_in: SolutionCreate,
    db: Session = Depends(get_db),
    current_student: Student = Depends(get_current_student),
):
    solution = solution_service.create_solution(db, student=current_student, obj_in=obj_in)
    return SolutionEnvelope(solution=SolutionPublic.model_validate(solution))
