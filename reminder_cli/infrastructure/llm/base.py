"""
Base advice provider with retry and error isolation.

Transport failures are retried with exponential backoff; every failure that
survives the retries is logged and turned into "no advice".
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from reminder_cli.config import get_logger, get_settings
from reminder_cli.config.settings import AdviceSettings
from reminder_cli.core.exceptions import (
    AdviceError,
    AdviceTimeoutError,
    AdviceUnavailableError,
)
from reminder_cli.core.interfaces import IAdviceProvider

logger = get_logger(__name__)

ADVICE_PROMPT = "Please generate brief advice for this reminder: {message}"


def build_prompt(message: str) -> str:
    """Embed a reminder message in the fixed advice instruction."""
    return ADVICE_PROMPT.format(message=message)


class BaseAdviceProvider(IAdviceProvider, ABC):
    """
    Base class for advice providers.

    Subclasses implement _request_advice, which may raise AdviceError or
    httpx transport errors; get_advice never raises.
    """

    provider_name = "advice"

    def __init__(self, settings: AdviceSettings | None = None) -> None:
        self.settings = settings or get_settings().advice

    @abstractmethod
    async def _request_advice(self, api_key: str, message: str) -> str:
        """Perform one advice request and return the advice text."""
        pass

    async def get_advice(self, api_key: str, message: str) -> str | None:
        """Generate advice, reporting any failure as None."""
        try:
            return await self._with_resilience(self._request_advice, api_key, message)
        except AdviceError as e:
            logger.warning("advice_failed", provider=self.provider_name, **e.to_dict())
            return None
        except Exception as e:
            logger.warning(
                "advice_failed",
                provider=self.provider_name,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return None

    def _get_retry_decorator(self) -> Any:
        """Get tenacity retry decorator with current settings."""
        delay = self.settings.retry_delay
        return retry(
            stop=stop_after_attempt(max(1, self.settings.max_retries)),
            wait=wait_exponential(
                multiplier=delay,
                min=delay,
                max=delay * (self.settings.retry_multiplier**3),
            ),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=self._log_retry,
            reraise=True,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        """Log retry attempts."""
        logger.info(
            "advice_retry",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _with_resilience(
        self,
        operation: Callable[..., Awaitable[str]],
        *args: Any,
        **kwargs: Any,
    ) -> str:
        """
        Execute operation with retry, mapping transport errors.

        Raises:
            AdviceTimeoutError: If every attempt timed out
            AdviceUnavailableError: If the provider could not be reached
        """
        retry_decorator = self._get_retry_decorator()
        try:
            return await retry_decorator(operation)(*args, **kwargs)
        except httpx.TimeoutException as e:
            raise AdviceTimeoutError(self.settings.timeout) from e
        except httpx.TransportError as e:
            raise AdviceUnavailableError(self.provider_name, str(e)) from e
