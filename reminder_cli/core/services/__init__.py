"""Core services: time parsing, scheduling and reminder orchestration."""

from reminder_cli.core.services.reminder_service import CreateResult, ReminderService
from reminder_cli.core.services.scheduler import ReminderScheduler
from reminder_cli.core.services.time_parser import (
    format_remaining,
    parse_canonical,
    parse_duration,
    parse_timestamp,
    parse_trigger_time,
    to_canonical,
)

__all__ = [
    "ReminderService",
    "CreateResult",
    "ReminderScheduler",
    "parse_trigger_time",
    "parse_duration",
    "parse_timestamp",
    "parse_canonical",
    "to_canonical",
    "format_remaining",
]
