"""Command-line reminders with optional AI advice and desktop notifications."""

__version__ = "0.1.0"
