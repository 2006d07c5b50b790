"""Database Session Manager — failure mapping, SQLite pragmas, readiness.

Tests:
    - SQLAlchemy exceptions map to DatabaseError with the most specific operation
    - SQLite engines enforce foreign keys
    - A failing session rolls back and re-raises DatabaseError
    - health_check reports a reachable database
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from game_catalog.core.errors import DatabaseError
from game_catalog.infrastructure.database import (
    DatabaseSessionManager, to_database_error,
)


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield mgr
    await mgr.dispose()


def test_integrity_error_maps_to_commit():
    err = to_database_error(IntegrityError("INSERT", {}, Exception("dup")))
    assert isinstance(err, DatabaseError)
    assert err.operation == "commit"
    assert err.http_status == 503


def test_operational_error_maps_to_execute():
    err = to_database_error(OperationalError("SELECT", {}, Exception("gone")))
    assert err.operation == "execute"


def test_generic_error_maps_to_unknown():
    assert to_database_error(SQLAlchemyError("boom")).operation == "unknown"


async def test_sqlite_foreign_keys_enabled(manager):
    async with manager.session() as db:
        enabled = await db.scalar(text("PRAGMA foreign_keys"))
    assert enabled == 1


async def test_failing_statement_raises_database_error(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_health_check_succeeds(manager):
    assert await manager.health_check() is True
