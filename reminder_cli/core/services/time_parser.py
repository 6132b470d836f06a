"""
Trigger time parsing and formatting.

Accepts either a '+'-prefixed relative duration ("+1h", "+30m", "+1d12h")
or an absolute RFC 3339 timestamp, and always produces an aware UTC datetime.
Stored trigger times use a fixed-width canonical form so that sorting the
strings sorts the instants.
"""

import re
from datetime import UTC, datetime, timedelta, timezone

from pytimeparse.timeparse import timeparse

from reminder_cli.core.exceptions import InvalidDurationError, InvalidTimestampError

RELATIVE_PREFIX = "+"

# Year is 365.25 days, month is 30.44 days
SECONDS_PER_YEAR = 31_557_600
SECONDS_PER_MONTH = 2_630_016

# pytimeparse has no year or month units and reads "M" as minutes
_CALENDAR_UNIT_RE = re.compile(
    r"(?<![\d.])(?P<value>\d+)\s*(?P<unit>years?|y|months?|M)(?![A-Za-z])"
)

_RFC3339_RE = re.compile(
    r"""
    ^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    [Tt\ ]
    (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})
    (?:\.(?P<fraction>\d+))?
    (?P<offset>[Zz]|(?P<sign>[+-])(?P<off_hour>\d{2}):(?P<off_minute>\d{2}))$
    """,
    re.VERBOSE,
)


def parse_trigger_time(value: str, now: datetime | None = None) -> datetime:
    """
    Resolve a user time expression to an absolute UTC instant.

    Args:
        value: "+<duration>" or an RFC 3339 timestamp
        now: Reference instant for relative expressions (defaults to utcnow)

    Returns:
        Aware datetime in UTC

    Raises:
        InvalidDurationError: '+' expression that is not a duration
        InvalidTimestampError: anything else that is not RFC 3339
    """
    value = value.strip()
    if value.startswith(RELATIVE_PREFIX):
        duration = parse_duration(value[len(RELATIVE_PREFIX):])
        reference = now or datetime.now(UTC)
        try:
            return reference.astimezone(UTC) + duration
        except OverflowError as e:
            raise InvalidDurationError(value, "out of range") from e
    return parse_timestamp(value)


def _take_calendar_units(text: str) -> tuple[int, str]:
    """Sum year and month terms and return them with the rest of the text."""
    total = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal total
        unit = match["unit"]
        if unit == "M" or unit.startswith("month"):
            total += int(match["value"]) * SECONDS_PER_MONTH
        else:
            total += int(match["value"]) * SECONDS_PER_YEAR
        return " "

    rest = _CALENDAR_UNIT_RE.sub(_replace, text)
    return total, rest.strip(" ,")


def parse_duration(expression: str) -> timedelta:
    """
    Parse a human duration such as "1h30m", "2d", "45 minutes" or "1y 2M".

    Uppercase "M" is a month and lowercase "m" a minute.
    """
    text = expression.strip()
    if not text:
        raise InvalidDurationError(expression, "empty duration")

    calendar_seconds, rest = _take_calendar_units(text)

    seconds = 0
    if rest:
        seconds = timeparse(rest)
        if seconds is None:
            raise InvalidDurationError(expression)
    if seconds < 0:
        raise InvalidDurationError(expression, "duration must not be negative")

    try:
        return timedelta(seconds=calendar_seconds + seconds)
    except OverflowError as e:
        raise InvalidDurationError(expression, "out of range") from e


def parse_timestamp(value: str) -> datetime:
    """Parse a strict RFC 3339 date-time and convert it to UTC."""
    match = _RFC3339_RE.match(value.strip())
    if match is None:
        raise InvalidTimestampError(value)

    if match["offset"] in ("Z", "z"):
        tz = UTC
    else:
        offset = timedelta(hours=int(match["off_hour"]), minutes=int(match["off_minute"]))
        if match["sign"] == "-":
            offset = -offset
        try:
            tz = timezone(offset)
        except ValueError as e:
            raise InvalidTimestampError(value, str(e)) from e

    # Sub-microsecond digits are truncated
    fraction = (match["fraction"] or "0")[:6].ljust(6, "0")

    try:
        parsed = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=tz,
        )
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError) as e:
        raise InvalidTimestampError(value, str(e)) from e


def to_canonical(instant: datetime) -> str:
    """Render an aware datetime in the canonical stored form."""
    if instant.tzinfo is None:
        raise ValueError("canonical trigger times require an aware datetime")
    return instant.astimezone(UTC).isoformat(timespec="microseconds")


def parse_canonical(text: str) -> datetime:
    """Read a stored trigger time back into a UTC datetime."""
    return parse_timestamp(text)


def format_remaining(delta: timedelta) -> str:
    """
    Human-readable signed duration, truncated to whole seconds.

    >>> format_remaining(timedelta(days=1, hours=2, seconds=5))
    '1day 2h 5s'
    >>> format_remaining(timedelta(minutes=-5))
    'overdue by 5m'
    """
    total = int(delta.total_seconds())
    if total < 0:
        return f"overdue by {_format_seconds(-total)}"
    return _format_seconds(total)


def _format_seconds(total: int) -> str:
    if total == 0:
        return "0s"

    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)

    parts = []
    if days:
        parts.append(f"{days}day" if days == 1 else f"{days}days")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds:
        parts.append(f"{seconds}s")
    return " ".join(parts)
