"""
Desktop notifications via plyer.

plyer picks the platform backend (libnotify/dbus, Windows toast, macOS)
at call time; a missing backend surfaces as a NotificationError.
"""

import asyncio

from plyer import notification

from reminder_cli.config import get_logger
from reminder_cli.config.settings import NotifierSettings
from reminder_cli.core.exceptions import NotificationError
from reminder_cli.core.interfaces import INotifier

logger = get_logger(__name__)


class DesktopNotifier(INotifier):
    """Shows a reminder as a desktop popup."""

    backend_name = "desktop"

    def __init__(self, settings: NotifierSettings):
        self.title = settings.title
        self.app_name = settings.app_name
        self.timeout = settings.timeout

    def _show(self, message: str) -> None:
        notification.notify(
            title=self.title,
            message=message,
            app_name=self.app_name,
            timeout=self.timeout,
        )

    async def notify(self, message: str) -> None:
        # plyer blocks on some platforms
        try:
            await asyncio.to_thread(self._show, message)
        except Exception as e:
            raise NotificationError(self.backend_name, f"{type(e).__name__}: {e}") from e

        logger.info("notification_shown", backend=self.backend_name, message_len=len(message))
