"""Pytest fixtures shared by the identity_vault test-suite."""

import pytest
from fastapi.testclient import TestClient

from identity_vault.database.config.config import get_settings
from identity_vault.database.config.connection_engine import Database
from identity_vault.main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture(autouse=True)
def settings(monkeypatch):
    """Test profile: in-memory SQLite, fixed JWT secret, cheap bcrypt."""
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def database(settings):
    """Fresh in-memory database with every table created."""
    db = Database.from_settings(settings)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database=database)
    return TestClient(app)


@pytest.fixture
def registered_user(client):
    """Register the scenario user and return its credentials and stored row."""
    credentials = {"name": "A", "email": "a@x.com", "password": "pw"}
    response = client.post("/register", json=credentials)
    assert response.status_code == 201
    return {**credentials, "row": response.json()}


@pytest.fixture
def token(client, registered_user):
    response = client.post("/login", json={"email": registered_user["email"], "password": registered_user["password"]})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
