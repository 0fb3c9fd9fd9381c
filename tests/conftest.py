"""Pytest configuration and shared fixtures."""
from collections.abc import Generator
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings
from app.database import Base, get_db
from app.main import app
from app.models import Assignment, CompletedAssignment, Unit, User, UserRole


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database per test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Generator[Session, None, None]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(engine) -> Generator[TestClient, None, None]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(name: str = "Student", role: UserRole = UserRole.STUDENT, **kwargs) -> User:
        counter["n"] += 1
        user = User(
            name=name,
            admission_number=kwargs.pop("admission_number", f"ADM{counter['n']:04d}"),
            role=role.value,
            **kwargs,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_unit(db):
    def _make(unit_code: str = "STA101", name: str = "Intro to Statistics", category: str = "Statistics") -> Unit:
        unit = Unit(unit_code=unit_code, name=name, category=category)
        db.add(unit)
        db.commit()
        db.refresh(unit)
        return unit

    return _make


@pytest.fixture
def make_assignment(db):
    def _make(unit_code: str, owner: User, title: str = "Assignment", created_at: datetime | None = None, **kwargs) -> Assignment:
        created_at = created_at or datetime.utcnow()
        assignment = Assignment(
            title=title,
            description=kwargs.pop("description", f"{title} description"),
            deadline=kwargs.pop("deadline", created_at + timedelta(days=7)),
            unit_code=unit_code,
            user_id=owner.id,
            created_at=created_at,
            **kwargs,
        )
        db.add(assignment)
        db.commit()
        db.refresh(assignment)
        return assignment

    return _make


@pytest.fixture
def complete(db):
    def _complete(assignment: Assignment, user: User, completed_at: datetime) -> CompletedAssignment:
        row = CompletedAssignment(assignment_id=assignment.id, user_id=user.id, completed_at=completed_at)
        db.add(row)
        db.commit()
        return row

    return _complete


def issue_token(user_id: str, admission_number: str, expires_in: timedelta = timedelta(hours=1)) -> str:
    """Sign a token the way the portal sign-in service does."""
    settings = get_settings()
    payload = {
        "sub": user_id,
        "admission_number": admission_number,
        "exp": datetime.utcnow() + expires_in,
        "type": "access",
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {issue_token(user.id, user.admission_number)}"}
