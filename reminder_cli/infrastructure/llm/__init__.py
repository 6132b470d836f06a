"""Advice provider implementations."""

from reminder_cli.core.interfaces.advice import IAdviceProvider
from reminder_cli.infrastructure.llm.base import BaseAdviceProvider, build_prompt
from reminder_cli.infrastructure.llm.deepseek import DeepSeekAdviceProvider, extract_content
from reminder_cli.infrastructure.llm.factory import get_advice_provider

__all__ = [
    # Interface
    "IAdviceProvider",
    # Base
    "BaseAdviceProvider",
    "build_prompt",
    # DeepSeek
    "DeepSeekAdviceProvider",
    "extract_content",
    # Factory
    "get_advice_provider",
]
