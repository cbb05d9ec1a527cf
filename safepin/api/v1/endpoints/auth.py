# safepin/api/v1/endpoints/auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from safepin.core.security import (
    authenticate_teacher,
    create_teacher_token,
    get_current_teacher,
    get_password_hash,
)
from safepin.db.session import get_db
from safepin.models.teacher import Teacher
from safepin.schemas.auth import (
    Token,
    LoginRequest,
    RegisterRequest,
    TeacherPublic,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=TeacherPublic, status_code=status.HTTP_201_CREATED)
def register_teacher(payload: RegisterRequest, db: Session = Depends(get_db)):
    existing = db.query(Teacher).filter(Teacher.email == payload.email).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    teacher = Teacher(
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        name=payload.name.strip(),
    )
    db.add(teacher)
    db.commit()
    db.refresh(teacher)

    return teacher


# JSON body login, used by the dashboard
@router.post("/login", response_model=Token)
def login_for_access_token(
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    teacher = authenticate_teacher(db, payload.email, payload.password)
    if not teacher:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_teacher_token(teacher))


@router.post("/token", response_model=Token)
def login_for_access_token_form(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """
    OAuth2 password flow for the docs' "Authorize" button.

    Put the teacher's email in the username field.
    """
    teacher = authenticate_teacher(db, form_data.username, form_data.password)
    if not teacher:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_teacher_token(teacher))


@router.get("/me", response_model=TeacherPublic)
def read_me(current_teacher: Teacher = Depends(get_current_teacher)):
    return current_teacher
