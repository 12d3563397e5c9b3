"""
Pytest configuration and fixtures.

The environment is pinned BEFORE the application is imported:
  - ENVIRONMENT=test => in-memory SQLite (single shared connection)
  - BCRYPT_ROUNDS=4  => fast hashing
  - JWT_SECRET       => fixed signing key

Every test starts from freshly created, empty tables.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-suite-signing-secret-0123456789"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("DATABASE_URL", None)

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from performance_api.database import create_db_and_tables, drop_db_and_tables, engine
from performance_api.main import app


@pytest.fixture(autouse=True)
def _fresh_tables():
    drop_db_and_tables()
    create_db_and_tables()
    yield
    drop_db_and_tables()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    with Session(engine) as session:
        yield session


def register_and_login(client, name, email, password, role=None):
    """Register an identity, log it in, and return {id, token, headers}."""
    body = {"name": name, "email": email, "password": password}
    if role:
        body["role"] = role
    registered = client.post("/auth/register", json=body)
    assert registered.status_code == 201, registered.text

    logged_in = client.post("/auth/login", json={"email": email, "password": password})
    assert logged_in.status_code == 200, logged_in.text
    token = logged_in.json()["token"]
    return {
        "id": registered.json()["user"]["id"],
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }


@pytest.fixture
def coach(client):
    return register_and_login(client, "Coach Carter", "coach@club.com", "coach123", role="coach")


@pytest.fixture
def player(client):
    return register_and_login(client, "Lionel Messi", "messi@club.com", "goat123")


@pytest.fixture
def player_profile(client, coach):
    """A player profile created through the API."""
    response = client.post(
        "/api/players",
        json={"name": "Kylian Mbappé", "age": 25, "position": "LW", "team": "PSG"},
        headers=coach["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()
