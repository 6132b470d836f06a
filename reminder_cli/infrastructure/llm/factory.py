"""
Advice provider factory.

Creates the provider configured in settings.
"""

from reminder_cli.config import get_settings
from reminder_cli.config.settings import Settings
from reminder_cli.core.interfaces import IAdviceProvider


def get_advice_provider(settings: Settings | None = None) -> IAdviceProvider:
    """
    Get an advice provider instance.

    Args:
        settings: Application settings (default: global settings)

    Returns:
        IAdviceProvider instance
    """
    settings = settings or get_settings()

    from reminder_cli.infrastructure.llm.deepseek import DeepSeekAdviceProvider

    return DeepSeekAdviceProvider(settings.advice)
