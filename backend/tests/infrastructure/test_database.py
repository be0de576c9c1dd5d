"""Session manager — error mapping and rollback behaviour."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from greenpledge.core.errors import DatabaseError, ResourceNotFoundError
from greenpledge.infrastructure.database import (
    DatabaseSessionManager, to_database_error,
)


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


def test_error_mapping_prefers_specific_types():
    integrity = to_database_error(IntegrityError("INSERT", {}, Exception("dup")))
    operational = to_database_error(OperationalError("SELECT", {}, Exception("down")))
    generic = to_database_error(SQLAlchemyError("boom"))

    assert integrity.operation == "commit"
    assert operational.operation == "execute"
    assert generic.operation == "unknown"
    assert all(e.http_status == 500 for e in (integrity, operational, generic))
    assert all(
        e.message == "An unexpected error occurred"
        for e in (integrity, operational, generic)
    )
    assert "dup" not in integrity.message


async def test_sqlalchemy_errors_become_database_error(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_domain_errors_pass_through(manager):
    with pytest.raises(ResourceNotFoundError):
        async with manager.session():
            raise ResourceNotFoundError("Project", "p-1")


async def test_foreign_keys_enforced_on_sqlite(manager):
    async with manager.session() as db:
        enabled = await db.scalar(text("PRAGMA foreign_keys"))
    assert enabled == 1


async def test_health_check(manager):
    assert await manager.health_check() is True
