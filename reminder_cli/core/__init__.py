"""Core domain layer - entities, interfaces, and exceptions."""

from reminder_cli.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
