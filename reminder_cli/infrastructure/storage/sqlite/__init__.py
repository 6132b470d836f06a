"""SQLite storage implementations."""

from reminder_cli.infrastructure.storage.sqlite.connection import ConnectionPool
from reminder_cli.infrastructure.storage.sqlite.reminder_store import SQLiteReminderStore


async def open_reminder_store(pool: ConnectionPool) -> SQLiteReminderStore:
    """Create a store on the given pool and make sure its table exists."""
    store = SQLiteReminderStore(pool)
    await store.initialize()
    return store


__all__ = [
    "ConnectionPool",
    "SQLiteReminderStore",
    "open_reminder_store",
]
