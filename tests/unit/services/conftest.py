"""Fixtures for service tests: in-memory doubles for the store and notifier."""

from unittest.mock import AsyncMock

import pytest

from reminder_cli.core.interfaces import INotifier, IReminderStore


@pytest.fixture
def mock_store() -> AsyncMock:
    store = AsyncMock(spec=IReminderStore)
    store.delete.return_value = True
    return store


@pytest.fixture
def mock_notifier() -> AsyncMock:
    return AsyncMock(spec=INotifier)
