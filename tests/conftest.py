"""
Shared fixtures for the API tests.

Each test runs against a fresh in-memory SQLite database (foreign keys on)
and a fake notifier that records deposits instead of sending e-mail.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import NotificationError
from app.database import Base, get_db
from app.main import app
from app.services.notifications import deposit_recipient, get_notifier

# Single shared connection so every session sees the same in-memory database
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeNotifier:
    """Records deposit notices; raises NotificationError when `fail` is set."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def notify_deposit(self, transaction):
        if self.fail:
            raise NotificationError("Failed to send deposit notification: relay down")
        self.sent.append((deposit_recipient(transaction), transaction))
        return True


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Create fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory():
    """Session maker bound to the same in-memory database as the client."""
    return TestingSessionLocal


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def client(notifier):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_account(client):
    """Register an account through the API and return its JSON body."""
    counter = {"n": 0}

    def _create(name="Michael", email=None, idcardno=None):
        counter["n"] += 1
        payload = {
            "idcardno": idcardno or f"{counter['n']:016d}",
            "name": name,
            "email": email or f"user{counter['n']}@mail.com",
        }
        response = client.post("/account", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
