"""Pytest configuration and fixtures."""

import os
from pathlib import Path

os.environ.setdefault("DATABASE_URL", f"sqlite:///{Path(__file__).parent / 'test.db'}")
os.environ.setdefault("PORT", "8000")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, create_db_engine, get_db, init_db  # noqa: E402
from src.main import app  # noqa: E402
from src.services.account_service import AccountService  # noqa: E402
from src.services.auth import TokenIssuer  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    init_db(engine)
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


@pytest.fixture
def token_issuer():
    return TokenIssuer("test-secret")


@pytest.fixture
def account_service(db, token_issuer):
    return AccountService(db, token_issuer)


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
def registered_user(client):
    """Register a user through the API and return its credentials and token."""
    credentials = {"name": "test user", "email": "test@example.com", "password": "testpass123"}
    response = client.post("/auth/register", json=credentials)
    assert response.status_code == 200
    return {**credentials, "token": response.json()["accessToken"]}
