"""Root conftest — shared test configuration and database/app fixtures.

Invariants:
    - Environment set before any greenpledge import so get_settings() sees it
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
    - get_db dependency overridden to use the test DB session
    - db_manager patched so health/readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific column types degrade to their generic forms)
    - bcrypt rounds lowered to the minimum: hashing cost is not under test
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from greenpledge.db.base import Base  # noqa: E402
import greenpledge.models  # noqa: E402,F401
from greenpledge.infrastructure.database import (  # noqa: E402
    build_engine, get_db, DatabaseSessionManager,
)
import greenpledge.infrastructure.database as db_module  # noqa: E402
from greenpledge.infrastructure.storage import DbStorage  # noqa: E402
from greenpledge.main import app  # noqa: E402


VALID_PROJECT = {
    "name": "Cloud Forest Revival",
    "description": "Replanting native cloud forest species on degraded pasture.",
    "location": "Monteverde, Costa Rica",
    "latitude": "10.3009",
    "longitude": "-84.8096",
    "projectType": "reforestation",
    "area": "120.50",
    "treesPlanted": "40000",
    "co2Offset": "800.00",
    "imageUrl": "https://example.org/cloud-forest.jpg",
    "status": "active",
}


@pytest.fixture
def project_payload() -> dict:
    return dict(VALID_PROJECT)


@pytest.fixture
async def test_engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:")

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
async def storage(test_db):
    return DbStorage(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seeded_project(client, project_payload):
    """A project created through the API; returns its JSON body."""
    res = await client.post("/api/projects", json=project_payload)
    assert res.status_code == 201
    return res.json()
