"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - The app under test reads its DatabaseSessionManager from app.state

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - StaticPool: one shared connection so every session sees the same memory DB
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the test database."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.db_manager = None
