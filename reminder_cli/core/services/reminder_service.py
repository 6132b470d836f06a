"""
Reminder service.

Orchestrates the create and list paths over the time parser, the store,
the advice provider and the scheduler.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from reminder_cli.config import get_logger, get_settings
from reminder_cli.config.settings import AdviceSettings
from reminder_cli.core.entities.reminder import PendingReminder
from reminder_cli.core.exceptions import TimeParseError, ValidationError
from reminder_cli.core.interfaces import IAdviceProvider, IReminderStore
from reminder_cli.core.services.scheduler import ReminderScheduler
from reminder_cli.core.services.time_parser import (
    parse_canonical,
    parse_trigger_time,
    to_canonical,
)

logger = get_logger(__name__)


@dataclass
class CreateResult:
    """Outcome of creating a reminder."""

    reminder_id: int
    advice: str | None
    trigger_at: datetime


class ReminderService:
    """
    Creates and lists reminders.

    A reminder counts as created once its row is stored: advice is optional
    enrichment and the notification fires later on its own.
    """

    def __init__(
        self,
        store: IReminderStore,
        scheduler: ReminderScheduler,
        advice_provider: IAdviceProvider,
        advice_settings: AdviceSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._store = store
        self._scheduler = scheduler
        self._advice_provider = advice_provider
        self._advice_settings = advice_settings
        self._clock = clock or (lambda: datetime.now(UTC))

    def _get_advice_settings(self) -> AdviceSettings:
        if self._advice_settings is None:
            self._advice_settings = get_settings().advice
        return self._advice_settings

    async def create(self, time_str: str, message: str) -> CreateResult:
        """
        Create, store and arm a reminder.

        Args:
            time_str: "+<duration>" or an RFC 3339 timestamp
            message: Reminder text

        Returns:
            CreateResult with the new ID and any advice text

        Raises:
            ValidationError: Empty message
            ConfigError: Advice credential is not configured
            TimeParseError: time_str is not a valid time expression
            StorageError: The reminder could not be stored
        """
        if not message or not message.strip():
            raise ValidationError("message", "must not be empty", message)

        api_key = self._get_advice_settings().require_api_key()

        trigger_at = parse_trigger_time(time_str, now=self._clock())

        advice = await self._advice_provider.get_advice(api_key, message)
        if advice is None:
            logger.warning("reminder_created_without_advice")

        reminder_id = await self._store.insert(message, to_canonical(trigger_at), advice)

        self._scheduler.arm(reminder_id, message, trigger_at)

        return CreateResult(reminder_id=reminder_id, advice=advice, trigger_at=trigger_at)

    async def list_pending(self, now: datetime | None = None) -> list[PendingReminder]:
        """
        List stored reminders with their remaining time.

        Rows whose stored trigger time cannot be read are logged and skipped.

        Raises:
            StorageError: The reminders could not be read
        """
        reminders = await self._store.list_all()
        now = now or self._clock()

        pending = []
        for reminder in reminders:
            try:
                trigger_at = parse_canonical(reminder.trigger_time)
            except TimeParseError as e:
                logger.warning(
                    "reminder_trigger_time_unreadable",
                    reminder_id=reminder.id,
                    **e.to_dict(),
                )
                continue

            pending.append(
                PendingReminder(
                    reminder=reminder,
                    trigger_at=trigger_at,
                    remaining=trigger_at - now,
                )
            )
        return pending
