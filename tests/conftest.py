# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from classroom.core.config import Settings
from classroom.db.database import Database
from classroom.main import create_app
from classroom.services.database_service import DatabaseService

PASSWORD = "secret123"


@pytest.fixture
def database():
    """A fresh in-memory SQLite database with every table created."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_service(database):
    """A DatabaseService over a single session, for repository-level tests."""
    session = database.session()
    try:
        yield DatabaseService(db_session=session)
    finally:
        session.close()


@pytest.fixture
def client(database):
    """A TestClient over an app wired to the in-memory database."""
    settings = Settings(DATABASE_URL="sqlite://", CLASS_CODE_MAX_ATTEMPTS=5)
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


def _register(client, username, role, name=None, password=PASSWORD):
    response = client.post(
        "/api/auth/register",
        json={"username": username, "password": password, "name": name or username.title(), "role": role},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def teacher(client):
    return _register(client, "teacher1", "teacher", name="Ms. Frizzle")


@pytest.fixture
def student(client):
    return _register(client, "student1", "student", name="Arnold")


@pytest.fixture
def classroom(client, teacher):
    response = client.post(
        "/api/classes",
        json={
            "teacherId": teacher["id"],
            "name": "Period 3 Biology",
            "subject": "Biology",
            "description": "Cells and ecosystems",
            "gradeLevel": "10",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def enrolled(client, classroom, student):
    response = client.post("/api/enrollments", json={"classCode": classroom["classCode"], "studentId": student["id"]})
    assert response.status_code == 201, response.text
    return response.json()["enrollment"]


@pytest.fixture
def make_user(client):
    """Registers a user through the API and returns its public profile."""
    def _make_user(username, role, name=None):
        return _register(client, username, role, name=name)
    return _make_user


@pytest.fixture
def password():
    return PASSWORD
