"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from reminder_cli.config import reset_settings

ENV_VARS = (
    "DEEPSEEK_API_KEY",
    "DEEPSEEK_BASE_URL",
    "DEEPSEEK_MODEL",
    "STORAGE_DATA_DIR",
    "STORAGE_DB_NAME",
    "NOTIFIER_BACKEND",
    "SCHEDULER_EXIT_GRACE_SECONDS",
    "LOG_LEVEL",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run every test in an empty directory with a clean environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("NOTIFIER_BACKEND", "log")
    reset_settings()
    yield tmp_path
    reset_settings()
