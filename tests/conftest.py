import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["GROQ_API_KEY"] = "test-groq-key"
os.environ.pop("SKILLNEST_FUNCTION_KEY", None)

from fastapi.testclient import TestClient

from skillnest.database import Base, get_db
from skillnest.main import app
from skillnest.services import llm_client
from tests.fakes import FakeUpstreamResponse, completion

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

USER_ID = "user-123"


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    return {"X-User-Id": USER_ID}


@pytest.fixture
def upstream(monkeypatch):
    """
    Replace the provider call. Tests set ``upstream.response``; every request
    made is recorded in ``upstream.calls``.
    """
    class Upstream:
        response = FakeUpstreamResponse(json_body=completion("{}"))
        calls = []

    state = Upstream()
    state.calls = []

    def fake_post(url, json=None, headers=None, timeout=None, stream=False):
        state.calls.append({"url": url, "json": json, "headers": headers, "stream": stream})
        return state.response

    monkeypatch.setattr(llm_client.requests, "post", fake_post)
    return state
