"""
Abstract interface for reminder storage.

Implemented by SQLiteReminderStore.
"""

from abc import ABC, abstractmethod

from reminder_cli.core.entities.reminder import Reminder


class IReminderStore(ABC):
    """Interface for reminder storage."""

    @abstractmethod
    async def initialize(self) -> None:
        """Create the backing table if absent. Safe to call repeatedly."""
        pass

    @abstractmethod
    async def insert(
        self, message: str, trigger_time: str, ai_advice: str | None = None
    ) -> int:
        """
        Store a new reminder.

        Args:
            message: Reminder text
            trigger_time: Canonical RFC 3339 UTC string
            ai_advice: Optional advice text

        Returns:
            Newly assigned reminder ID
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[Reminder]:
        """List every stored reminder, earliest trigger time first."""
        pass

    @abstractmethod
    async def delete(self, reminder_id: int) -> bool:
        """
        Delete a reminder by ID.

        Returns:
            True if a row was removed, False if it did not exist
        """
        pass
