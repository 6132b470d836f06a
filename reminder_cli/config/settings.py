"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables (and a local .env file)
with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reminder_cli.core.exceptions import ConfigError

API_KEY_ENV = "DEEPSEEK_API_KEY"


class AdviceSettings(BaseSettings):
    """Chat-completion provider used for reminder advice."""

    model_config = SettingsConfigDict(
        env_prefix="DEEPSEEK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_key: str | None = None
    base_url: str = "https://api.deepseek.com/v1"
    model: str = "deepseek-chat"
    temperature: float = 0.5
    timeout: float = 30.0

    # Retry settings
    max_retries: int = 2
    retry_delay: float = 0.5
    retry_multiplier: float = 2.0

    def require_api_key(self) -> str:
        """Return the API key or fail with a descriptive ConfigError."""
        if not self.api_key or not self.api_key.strip():
            raise ConfigError(
                f"Please set {API_KEY_ENV} in the environment or .env file",
                details={"variable": API_KEY_ENV},
            )
        return self.api_key.strip()


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    data_dir: Path = Path(".")
    db_name: str = "reminders.db"

    # SQLite settings
    pool_size: int = 2
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class NotifierSettings(BaseSettings):
    """Notification delivery configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NOTIFIER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    backend: Literal["desktop", "log"] = "desktop"
    title: str = "Reminder"
    app_name: str = "reminder-cli"
    timeout: int = 10  # seconds the desktop popup stays visible


class SchedulerSettings(BaseSettings):
    """Scheduler configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # How long the CLI lets already-due reminders fire before exiting
    exit_grace_seconds: float = 1.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "reminder-cli"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Sub-settings
    advice: AdviceSettings = Field(default_factory=AdviceSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    notifier: NotifierSettings = Field(default_factory=NotifierSettings)
    scheduler: SchedulerSettings = Field(default_factory=SchedulerSettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
