"""Abstract interface for advice providers."""

from abc import ABC, abstractmethod


class IAdviceProvider(ABC):
    """
    Best-effort source of advisory text for a reminder.

    Implementations must never raise: every failure is logged and reported
    as None.
    """

    @abstractmethod
    async def get_advice(self, api_key: str, message: str) -> str | None:
        """
        Generate advice for a reminder message.

        Args:
            api_key: Provider credential
            message: Reminder text

        Returns:
            Advice text, or None if generation failed
        """
        pass
