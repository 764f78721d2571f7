"""API test fixtures.

Each test gets the real app wired to its own seeded SQLite file through a
get_db_session override. The database is prepared with asyncio.run because
TestClient drives the app from its own event loop.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_db_session
from src.infrastructure.persistence.database import Database
from src.main import app
from tests.conftest import prepare_database


@pytest.fixture
def api_database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    asyncio.run(prepare_database(db))
    yield db
    asyncio.run(db.close())


@pytest.fixture
def client(api_database):
    """Create TestClient for API tests using real app."""

    async def override_get_db_session():
        async with api_database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


VALID_USER = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@example.com",
    "password": "Password123!",
    "role": "ROLE_USER",
}


@pytest.fixture
def registered_user_id(client) -> int:
    """Register VALID_USER and return its id (looked up via login)."""
    assert client.post("/user", json=VALID_USER).status_code == 201
    response = client.post(
        "/auth/login",
        json={"email": VALID_USER["email"], "password": VALID_USER["password"]},
    )
    return response.json()["userId"]
