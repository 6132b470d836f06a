"""Core domain entities."""

from reminder_cli.core.entities.reminder import PendingReminder, Reminder

__all__ = ["Reminder", "PendingReminder"]
