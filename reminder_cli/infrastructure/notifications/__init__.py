"""Notification backends."""

from reminder_cli.config import get_settings
from reminder_cli.config.settings import Settings
from reminder_cli.core.interfaces import INotifier
from reminder_cli.infrastructure.notifications.log import LogNotifier


def get_notifier(settings: Settings | None = None) -> INotifier:
    """
    Get the notifier selected by NOTIFIER_BACKEND.

    The desktop backend is imported lazily so that plyer is only loaded
    when it is actually used.
    """
    settings = settings or get_settings()
    backend = settings.notifier.backend

    if backend == "desktop":
        from reminder_cli.infrastructure.notifications.desktop import DesktopNotifier

        return DesktopNotifier(settings.notifier)

    elif backend == "log":
        return LogNotifier()

    else:
        raise ValueError(f"Unknown notifier backend: {backend}")


__all__ = [
    "LogNotifier",
    "get_notifier",
]
