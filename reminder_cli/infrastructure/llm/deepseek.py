"""
DeepSeek advice provider.

Sends one OpenAI-compatible chat-completion request per reminder.
"""

import json
import time
from typing import Any

import httpx

from reminder_cli.config import get_logger
from reminder_cli.core.exceptions import AdviceResponseError, AdviceUnavailableError
from reminder_cli.infrastructure.llm.base import BaseAdviceProvider, build_prompt

logger = get_logger(__name__)


def extract_content(data: Any) -> str | None:
    """Pull choices[0].message.content out of a chat-completion body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(content, str) or not content.strip():
        return None
    return content.strip()


class DeepSeekAdviceProvider(BaseAdviceProvider):
    """DeepSeek chat-completions client."""

    provider_name = "deepseek"

    @property
    def endpoint(self) -> str:
        return f"{self.settings.base_url.rstrip('/')}/chat/completions"

    def _build_payload(self, message: str) -> dict:
        return {
            "model": self.settings.model,
            "messages": [{"role": "user", "content": build_prompt(message)}],
            "temperature": self.settings.temperature,
        }

    async def _request_advice(self, api_key: str, message: str) -> str:
        """POST the chat request and extract the advice text."""
        start_time = time.time()

        async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
            response = await client.post(
                self.endpoint,
                json=self._build_payload(message),
                headers={"Authorization": f"Bearer {api_key}"},
            )

        if response.status_code != 200:
            raise AdviceUnavailableError(
                self.provider_name, f"HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise AdviceResponseError("response is not valid JSON", response.text) from e

        content = extract_content(data)
        if content is None:
            raise AdviceResponseError("missing content field", json.dumps(data))

        logger.info(
            "advice_generated",
            model=self.settings.model,
            message_len=len(message),
            response_len=len(content),
            elapsed_ms=int((time.time() - start_time) * 1000),
        )
        return content
