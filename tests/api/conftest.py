"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager replaced by a manager bound to the test engine (ready=True)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - ASGITransport does not run the lifespan, so no real connection is attempted
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import taskapi.infrastructure.database as db_module
import taskapi.models  # noqa: F401
from taskapi.db.base import Base
from taskapi.infrastructure.database import DatabaseSessionManager, get_db
from taskapi.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    """A session manager bound to the test engine, skipping __init__."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    manager.ready = True
    return manager


@pytest.fixture
async def client(fake_manager, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_user(client):
    """Create a user through the API and return its payload."""
    res = await client.post("/api/users", json={"username": "Alice"})
    assert res.status_code == 200
    return res.json()["payload"]
