"""Pytest configuration for async testing.

This configuration ensures:
1. Required settings exist before any src module is imported
2. Each database fixture gets its own SQLite file (full isolation)
3. Roles are seeded exactly as at application startup
4. Fast bcrypt (cost 4) everywhere
"""

import inspect
import os

# Settings are read at import time by src.core.config
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-characters")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402
from src.infrastructure.persistence.seeds import seed_roles  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]


async def prepare_database(db: Database) -> None:
    """Create tables and seed roles (mirrors application startup)."""
    await db.create_all()
    async with db.get_session() as session:
        await seed_roles(session)


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh, seeded SQLite database per test."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await prepare_database(db)
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    """Session that commits on exit (same as a request session)."""
    async with database.get_session() as session:
        yield session


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP API tests through the FastAPI app")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
