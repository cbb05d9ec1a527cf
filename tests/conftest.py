# tests/conftest.py
import os

# settings are read at import time; point them at throwaway values first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["S3_BUCKET_NAME"] = "test-bucket"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from safepin.core.security import (
    create_student_token,
    create_teacher_token,
    get_password_hash,
)
from safepin.db.base import Base
from safepin.db.session import get_db
from safepin.main import app
from safepin.models import Classroom, Student, Teacher
from safepin.services.storage_client import get_storage_client

# Test database (in-memory SQLite shared by every connection)
TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeStorage:
    """Stands in for the S3 client; remembers what was uploaded."""

    def __init__(self):
        self.uploads = []

    def upload(self, key, body, content_type=None):
        self.uploads.append((key, len(body), content_type))
        return f"https://cdn.test/{key}"


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(db_session, storage):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_client] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_teacher(db_session):
    teacher = Teacher(
        email="park@hanbit.es.kr",
        password_hash=get_password_hash("password123"),
        name="Park",
    )
    db_session.add(teacher)
    db_session.commit()
    db_session.refresh(teacher)
    return teacher


@pytest.fixture
def teacher_headers(test_teacher):
    return {"Authorization": f"Bearer {create_teacher_token(test_teacher)}"}


@pytest.fixture
def test_class(db_session, test_teacher):
    classroom = Classroom(pin="4821", name="3-1", teacher_id=test_teacher.id)
    db_session.add(classroom)
    db_session.commit()
    db_session.refresh(classroom)
    return classroom


@pytest.fixture
def test_student(db_session, test_class):
    student = Student(class_id=test_class.id, name="Kim", session_id="session-kim")
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)
    return student


@pytest.fixture
def student_headers(test_student):
    return {"Authorization": f"Bearer {create_student_token(test_student)}"}


@pytest.fixture
def other_student(db_session, test_class):
    student = Student(class_id=test_class.id, name="Lee", session_id="session-lee")
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)
    return student
