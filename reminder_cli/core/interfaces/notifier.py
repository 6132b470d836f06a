"""Abstract interface for notification delivery."""

from abc import ABC, abstractmethod


class INotifier(ABC):
    """Delivers a fired reminder to the user."""

    @abstractmethod
    async def notify(self, message: str) -> None:
        """
        Show a notification.

        Raises:
            NotificationError: If delivery failed
        """
        pass
