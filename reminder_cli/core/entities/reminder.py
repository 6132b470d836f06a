"""Reminder entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from pydantic import BaseModel


class Reminder(BaseModel):
    """
    A stored reminder.

    Fields hold exactly what was persisted (an empty message read back from
    storage is kept as is); trigger_time is the canonical RFC 3339 UTC string.
    Reminders are never updated, only deleted once they fire.
    """

    id: int | None = None
    message: str
    trigger_time: str
    ai_advice: str | None = None


@dataclass
class PendingReminder:
    """A stored reminder resolved against the current time for display."""

    reminder: Reminder
    trigger_at: datetime
    remaining: timedelta

    @property
    def is_overdue(self) -> bool:
        return self.remaining < timedelta(0)
