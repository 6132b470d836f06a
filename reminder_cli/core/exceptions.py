"""
Domain exceptions for the reminder CLI.

Errors raised before a reminder is stored (config, validation, time parsing,
storage) abort the command. Errors raised afterwards (advice, notification,
post-fire cleanup) are only ever logged.
"""

from typing import Any


class ReminderError(Exception):
    """Base exception for all reminder-cli errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for structured logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(ReminderError):
    """Required configuration is missing or invalid."""

    pass


class ValidationError(ReminderError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


# Time parsing
class TimeParseError(ReminderError):
    """Base exception for time expression parsing."""

    pass


class InvalidDurationError(TimeParseError):
    """A '+'-prefixed expression is not a valid duration."""

    def __init__(self, expression: str, reason: str | None = None):
        super().__init__(
            f"Invalid duration '{expression}'" + (f": {reason}" if reason else ""),
            code="INVALID_DURATION",
            details={"expression": expression, "reason": reason},
        )


class InvalidTimestampError(TimeParseError):
    """A timestamp is not valid RFC 3339."""

    def __init__(self, value: str, reason: str | None = None):
        super().__init__(
            f"Invalid RFC 3339 timestamp '{value}'" + (f": {reason}" if reason else ""),
            code="INVALID_TIMESTAMP",
            details={"value": value, "reason": reason},
        )


# Storage
class StorageError(ReminderError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Advice
class AdviceError(ReminderError):
    """Base exception for advice generation."""

    pass


class AdviceUnavailableError(AdviceError):
    """Advice provider could not be reached or refused the request."""

    def __init__(self, provider: str, reason: str | None = None):
        super().__init__(
            f"Advice provider unavailable: {provider}" + (f" - {reason}" if reason else ""),
            code="ADVICE_UNAVAILABLE",
            details={"provider": provider, "reason": reason},
        )


class AdviceTimeoutError(AdviceError):
    """Advice request timed out."""

    def __init__(self, timeout: float):
        super().__init__(
            f"Advice request timed out after {timeout} seconds",
            code="ADVICE_TIMEOUT",
            details={"timeout": timeout},
        )


class AdviceResponseError(AdviceError):
    """Advice provider returned a malformed response."""

    def __init__(self, reason: str, response: str | None = None):
        super().__init__(
            f"Malformed advice response: {reason}",
            code="ADVICE_RESPONSE_ERROR",
            details={"reason": reason, "response_preview": (response or "")[:200]},
        )


# Firing
class NotificationError(ReminderError):
    """Notification delivery failed."""

    def __init__(self, backend: str, reason: str):
        super().__init__(
            f"Notification via {backend} failed: {reason}",
            code="NOTIFICATION_FAILED",
            details={"backend": backend, "reason": reason},
        )


class NotifyDeleteError(ReminderError):
    """Removing a fired reminder from storage failed."""

    def __init__(self, reminder_id: int, reason: str):
        super().__init__(
            f"Failed to delete fired reminder {reminder_id}: {reason}",
            code="NOTIFY_DELETE_FAILED",
            details={"reminder_id": reminder_id, "reason": reason},
        )
