"""Notifier that only writes a log event, for headless machines."""

from reminder_cli.config import get_logger
from reminder_cli.core.interfaces import INotifier

logger = get_logger(__name__)


class LogNotifier(INotifier):
    backend_name = "log"

    async def notify(self, message: str) -> None:
        logger.warning("reminder_notification", message=message)
