"""
Reminder command-line interface.

Usage:
    reminder-cli create +1h "Stand up and stretch"
    reminder-cli create 2025-01-01T12:00:00Z "Happy new year" --wait
    reminder-cli list

Relative times start with '+' ("+30m", "+1h30m", "+2d"); absolute times are
RFC 3339 timestamps. DEEPSEEK_API_KEY must be set (environment or .env) to
create reminders.
"""

import argparse
import asyncio
import sys

from reminder_cli import __version__
from reminder_cli.config import configure_logging, get_logger, get_settings
from reminder_cli.config.settings import Settings
from reminder_cli.core.exceptions import ReminderError
from reminder_cli.core.services import ReminderScheduler, ReminderService, format_remaining
from reminder_cli.infrastructure.llm import get_advice_provider
from reminder_cli.infrastructure.notifications import get_notifier
from reminder_cli.infrastructure.storage.sqlite import ConnectionPool, open_reminder_store

logger = get_logger(__name__)

ADVICE_RULE = "=" * 31


async def cmd_create(
    args: argparse.Namespace, service: ReminderService, scheduler: ReminderScheduler
) -> int:
    """Create a reminder and print its ID and advice."""
    result = await service.create(args.time, args.message)

    print(f"Reminder #{result.reminder_id} created (fires at {result.trigger_at.isoformat()})")
    if result.advice:
        print(" AI Advice ".center(len(ADVICE_RULE), "="))
        print(result.advice)
        print(ADVICE_RULE)
    else:
        print("No AI advice generated")

    if args.wait:
        print("Waiting for the reminder to fire (Ctrl+C to stop)...")
        await scheduler.wait_for(result.reminder_id)

    return 0


async def cmd_list(
    args: argparse.Namespace, service: ReminderService, scheduler: ReminderScheduler
) -> int:
    """Print every pending reminder, earliest first."""
    pending = await service.list_pending()

    if not pending:
        print("No pending reminders")
        return 0

    for item in pending:
        reminder = item.reminder
        print(f"#{reminder.id} - {reminder.message}")
        print(f"  Time remaining: {format_remaining(item.remaining)}")
        print(f"  Advice: {reminder.ai_advice or 'None'}")

    return 0


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    pool = ConnectionPool.from_settings(settings.storage)
    scheduler: ReminderScheduler | None = None

    try:
        store = await open_reminder_store(pool)
        scheduler = ReminderScheduler(store, get_notifier(settings))
        service = ReminderService(
            store,
            scheduler,
            get_advice_provider(settings),
            advice_settings=settings.advice,
        )
        return await args.func(args, service, scheduler)

    except ReminderError as e:
        logger.debug("command_failed", command=args.command, **e.to_dict())
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    finally:
        if scheduler is not None:
            # Let reminders that are already due fire before exiting
            await scheduler.wait_pending(timeout=settings.scheduler.exit_grace_seconds)
            await scheduler.shutdown()
        await pool.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reminder-cli",
        description="Create time-triggered reminders with optional AI advice",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # create
    p_create = sub.add_parser(
        "create", help="Create a reminder (format: +1h or 2023-12-31T23:59:00Z)"
    )
    p_create.add_argument("time", help="'+<duration>' (e.g. +30m, +1h) or an RFC 3339 timestamp")
    p_create.add_argument("message", help="Reminder text")
    p_create.add_argument(
        "--wait", action="store_true", help="Keep running until the reminder has fired"
    )
    p_create.set_defaults(func=cmd_create)

    # list
    p_list = sub.add_parser("list", help="List all pending reminders")
    p_list.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else None)

    try:
        return asyncio.run(_run(args, settings))
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
