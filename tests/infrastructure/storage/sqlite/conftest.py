"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from reminder_cli.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteReminderStore,
    open_reminder_store,
)


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def pool(temp_db_path: Path) -> AsyncGenerator[ConnectionPool, None]:
    """Connection pool on a fresh database file."""
    pool = ConnectionPool(temp_db_path, pool_size=2, busy_timeout=5000)
    yield pool
    await pool.close()


@pytest.fixture
async def store(pool: ConnectionPool) -> SQLiteReminderStore:
    """Reminder store with its table created."""
    return await open_reminder_store(pool)
