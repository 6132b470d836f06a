"""Storage infrastructure implementations."""

from reminder_cli.infrastructure.storage.sqlite import ConnectionPool, SQLiteReminderStore

__all__ = [
    "ConnectionPool",
    "SQLiteReminderStore",
]
