"""Core interfaces (ports) for dependency injection."""

from reminder_cli.core.interfaces.advice import IAdviceProvider
from reminder_cli.core.interfaces.notifier import INotifier
from reminder_cli.core.interfaces.storage import IReminderStore

__all__ = [
    "IAdviceProvider",
    "INotifier",
    "IReminderStore",
]
