"""
One-shot reminder scheduler.

Each armed reminder gets its own asyncio task that sleeps until the trigger
instant, shows the notification and then removes the row. Armed tasks live
only as long as the process; a reminder that has not fired by exit stays in
storage undelivered.
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime

from reminder_cli.config import get_logger
from reminder_cli.core.exceptions import (
    NotificationError,
    NotifyDeleteError,
    StorageError,
)
from reminder_cli.core.interfaces import INotifier, IReminderStore

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReminderScheduler:
    """
    Fire-and-forget scheduler for stored reminders.

    arm() never blocks and never fails; whatever goes wrong when a reminder
    fires is logged and dropped.
    """

    def __init__(
        self,
        store: IReminderStore,
        notifier: INotifier,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._notifier = notifier
        self._clock = clock
        # Strong references keep armed tasks from being garbage-collected
        self._tasks: dict[int, asyncio.Task[None]] = {}

    @property
    def pending_count(self) -> int:
        """Number of armed reminders that have not fired yet."""
        return len(self._tasks)

    def arm(self, reminder_id: int, message: str, trigger_time: datetime) -> None:
        """
        Arm a one-shot notification for a stored reminder.

        Must be called from inside a running event loop.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(
            self._fire(reminder_id, message, trigger_time),
            name=f"reminder-{reminder_id}",
        )
        self._tasks[reminder_id] = task
        task.add_done_callback(lambda t, rid=reminder_id: self._forget(rid, t))

        logger.debug(
            "reminder_armed",
            reminder_id=reminder_id,
            trigger_time=trigger_time.isoformat(),
        )

    def _forget(self, reminder_id: int, task: asyncio.Task[None]) -> None:
        if self._tasks.get(reminder_id) is task:
            del self._tasks[reminder_id]

    async def _fire(self, reminder_id: int, message: str, trigger_time: datetime) -> None:
        wait_seconds = (trigger_time - self._clock()).total_seconds()
        if wait_seconds > 0:
            await asyncio.sleep(wait_seconds)

        logger.info("reminder_fired", reminder_id=reminder_id)

        try:
            await self._deliver(message)
        except NotificationError as e:
            logger.error("notification_failed", reminder_id=reminder_id, **e.to_dict())

        try:
            await self._cleanup(reminder_id)
        except NotifyDeleteError as e:
            logger.error("reminder_cleanup_failed", **e.to_dict())

    async def _deliver(self, message: str) -> None:
        try:
            await self._notifier.notify(message)
        except NotificationError:
            raise
        except Exception as e:
            raise NotificationError(type(self._notifier).__name__, str(e)) from e

    async def _cleanup(self, reminder_id: int) -> None:
        try:
            await self._store.delete(reminder_id)
        except StorageError as e:
            raise NotifyDeleteError(reminder_id, e.message) from e
        except Exception as e:
            raise NotifyDeleteError(reminder_id, f"{type(e).__name__}: {e}") from e

    async def wait_pending(self, timeout: float | None = None) -> int:
        """
        Wait for armed reminders to fire.

        Args:
            timeout: Seconds to wait at most (None waits for all of them)

        Returns:
            Number of reminders still armed afterwards
        """
        tasks = list(self._tasks.values())
        if not tasks:
            return 0
        _, pending = await asyncio.wait(tasks, timeout=timeout)
        return len(pending)

    async def wait_for(self, reminder_id: int) -> None:
        """Wait until one armed reminder has fired. No-op if it is not armed."""
        task = self._tasks.get(reminder_id)
        if task is not None:
            await asyncio.wait([task])

    async def shutdown(self) -> None:
        """Discard every reminder that is still armed."""
        tasks = list(self._tasks.values())
        if not tasks:
            return

        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        logger.info("armed_reminders_discarded", count=len(tasks))
