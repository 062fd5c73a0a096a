"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from taskboard.database import Base, get_db
from taskboard.main import app
from taskboard.models.user import User
from taskboard.services.auth import get_password_hash


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/taskboard", "/taskboard_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpass123"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Return a helper that registers a user and returns their auth headers."""

    def _register(email: str, name: str | None = None) -> AuthHeaders:
        response = client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": TEST_PASSWORD, "name": name},
        )
        assert response.status_code == 201
        data = response.json()
        return AuthHeaders(
            {"Authorization": f"Bearer {data['access_token']}"},
            user_id=data["user"]["id"],
            email=email,
        )

    return _register


@pytest.fixture
def auth_headers(register):
    """Create a user and return auth headers with user info."""
    return register("test@example.com", "Test User")


@pytest.fixture
def other_headers(register):
    """A second, unrelated user."""
    return register("other@example.com", "Other User")


@pytest.fixture
def make_user(db):
    """Return a helper that inserts a user directly, for service-level tests."""

    def _make_user(email: str, name: str | None = None) -> User:
        user = User(email=email, password_hash=get_password_hash(TEST_PASSWORD), name=name)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def board(client, auth_headers):
    """A board owned by the auth_headers user."""
    response = client.post("/api/v1/boards", headers=auth_headers, json={"name": "Test Board"})
    assert response.status_code == 201
    return response.json()
