"""Tests for notification backends."""

from unittest.mock import patch

import pytest

from reminder_cli.config import get_settings
from reminder_cli.config.settings import NotifierSettings
from reminder_cli.core.exceptions import NotificationError
from reminder_cli.infrastructure.notifications import LogNotifier, get_notifier
from reminder_cli.infrastructure.notifications.desktop import DesktopNotifier

PLYER_PATH = "reminder_cli.infrastructure.notifications.desktop.notification"


class TestDesktopNotifier:
    async def test_passes_settings_to_plyer(self):
        notifier = DesktopNotifier(NotifierSettings(title="Heads up", app_name="rc", timeout=5))

        with patch(PLYER_PATH) as notification:
            await notifier.notify("Stand up")

        notification.notify.assert_called_once_with(
            title="Heads up", message="Stand up", app_name="rc", timeout=5
        )

    async def test_backend_failure_becomes_notification_error(self):
        notifier = DesktopNotifier(NotifierSettings())

        with patch(PLYER_PATH) as notification:
            notification.notify.side_effect = NotImplementedError("No usable implementation")
            with pytest.raises(NotificationError) as exc_info:
                await notifier.notify("x")

        assert exc_info.value.details["backend"] == "desktop"
        assert "NotImplementedError" in exc_info.value.details["reason"]


class TestLogNotifier:
    async def test_notify_does_not_raise(self):
        await LogNotifier().notify("hello")


class TestFactory:
    def test_log_backend(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NOTIFIER_BACKEND", "log")
        assert isinstance(get_notifier(get_settings()), LogNotifier)

    def test_desktop_backend(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NOTIFIER_BACKEND", "desktop")
        assert isinstance(get_notifier(get_settings()), DesktopNotifier)
