"""
SQLite implementation of reminder storage.

One table, created on demand; rows are inserted, listed in trigger order
and deleted once their notification has fired.
"""

import aiosqlite
import pydantic

from reminder_cli.config import get_logger
from reminder_cli.core.entities.reminder import Reminder
from reminder_cli.core.exceptions import DatabaseError
from reminder_cli.core.interfaces.storage import IReminderStore
from reminder_cli.infrastructure.storage.sqlite.connection import ConnectionPool

logger = get_logger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS reminders (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        message TEXT NOT NULL,
        trigger_time TEXT NOT NULL,
        ai_advice TEXT
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_reminders_trigger_time
    ON reminders(trigger_time)
    """,
)


class SQLiteReminderStore(IReminderStore):
    """SQLite implementation of reminder storage."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    @property
    def pool(self) -> ConnectionPool:
        return self._pool

    async def initialize(self) -> None:
        """Create the reminders table if it does not exist."""
        try:
            async with self._pool.transaction() as conn:
                for statement in SCHEMA:
                    await conn.execute(statement)
        except (aiosqlite.Error, OSError) as e:
            raise DatabaseError("initialize", str(e)) from e

    async def insert(
        self, message: str, trigger_time: str, ai_advice: str | None = None
    ) -> int:
        """Insert a reminder and return its new ID."""
        try:
            async with self._pool.transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO reminders (message, trigger_time, ai_advice)
                    VALUES (?, ?, ?)
                    """,
                    (message, trigger_time, ai_advice),
                )
                reminder_id = cursor.lastrowid
        except aiosqlite.Error as e:
            raise DatabaseError("insert", str(e)) from e

        logger.info("reminder_created", reminder_id=reminder_id, trigger_time=trigger_time)
        return reminder_id

    async def list_all(self) -> list[Reminder]:
        """
        List all reminders ordered by trigger time.

        Rows that cannot be turned into a Reminder are logged and skipped.
        """
        try:
            async with self._pool.acquire() as conn:
                cursor = await conn.execute(
                    """
                    SELECT id, message, trigger_time, ai_advice
                    FROM reminders
                    ORDER BY trigger_time ASC, id ASC
                    """
                )
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError("list", str(e)) from e

        reminders = []
        for row in rows:
            try:
                reminders.append(self._row_to_entity(row))
            except pydantic.ValidationError as e:
                logger.warning(
                    "reminder_row_unreadable",
                    reminder_id=row["id"],
                    error=str(e),
                )
        return reminders

    async def delete(self, reminder_id: int) -> bool:
        """Delete a reminder by ID. Missing IDs are not an error."""
        try:
            async with self._pool.transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM reminders WHERE id = ?", (reminder_id,)
                )
                deleted = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise DatabaseError("delete", str(e)) from e

        if deleted:
            logger.info("reminder_deleted", reminder_id=reminder_id)
        return deleted

    @staticmethod
    def _row_to_entity(row: aiosqlite.Row) -> Reminder:
        """Convert a database row to a Reminder entity."""
        return Reminder(
            id=row["id"],
            message=row["message"],
            trigger_time=row["trigger_time"],
            ai_advice=row["ai_advice"],
        )
