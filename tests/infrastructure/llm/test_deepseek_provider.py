"""Unit tests for DeepSeekAdviceProvider.

Tests cover:
- Request payload and authorization header
- Extraction of choices[0].message.content
- Retry on transport errors
- Every failure mode degrading to None
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from reminder_cli.config.settings import AdviceSettings
from reminder_cli.infrastructure.llm.base import build_prompt
from reminder_cli.infrastructure.llm.deepseek import DeepSeekAdviceProvider, extract_content

CLIENT_PATH = "reminder_cli.infrastructure.llm.deepseek.httpx.AsyncClient"


@pytest.fixture
def provider() -> DeepSeekAdviceProvider:
    """Provider with zero backoff for fast tests."""
    settings = AdviceSettings(
        api_key="sk-test",
        base_url="https://api.example.test/v1/",
        model="deepseek-chat",
        temperature=0.5,
        timeout=5.0,
        max_retries=2,
        retry_delay=0,
    )
    return DeepSeekAdviceProvider(settings)


def _response(status_code: int = 200, body: object = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = body
    return response


def _client(post_result=None, side_effect=None) -> AsyncMock:
    client = AsyncMock()
    if side_effect is not None:
        client.post.side_effect = side_effect
    else:
        client.post.return_value = post_result
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def _completion(content: object) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestExtractContent:
    def test_extracts_text(self):
        assert extract_content(_completion("  Drink water.  ")) == "Drink water."

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"choices": []},
            {"choices": [{}]},
            {"choices": [{"message": {}}]},
            _completion(None),
            _completion(""),
            _completion(42),
            None,
            ["not", "a", "dict"],
        ],
    )
    def test_missing_or_empty(self, body):
        assert extract_content(body) is None


class TestGetAdvice:
    async def test_returns_content(self, provider: DeepSeekAdviceProvider):
        client = _client(_response(body=_completion("Prepare your notes tonight.")))

        with patch(CLIENT_PATH, return_value=client):
            advice = await provider.get_advice("sk-test", "Team meeting")

        assert advice == "Prepare your notes tonight."

    async def test_request_shape(self, provider: DeepSeekAdviceProvider):
        client = _client(_response(body=_completion("ok")))

        with patch(CLIENT_PATH, return_value=client):
            await provider.get_advice("sk-secret", "Pay rent")

        url = client.post.call_args.args[0]
        kwargs = client.post.call_args.kwargs
        assert url == "https://api.example.test/v1/chat/completions"
        assert kwargs["headers"] == {"Authorization": "Bearer sk-secret"}
        assert kwargs["json"] == {
            "model": "deepseek-chat",
            "messages": [{"role": "user", "content": build_prompt("Pay rent")}],
            "temperature": 0.5,
        }

    def test_prompt_embeds_message(self):
        assert build_prompt("Pay rent") == (
            "Please generate brief advice for this reminder: Pay rent"
        )

    async def test_retries_transport_error_then_succeeds(self, provider: DeepSeekAdviceProvider):
        client = _client(
            side_effect=[
                httpx.ConnectError("Connection refused"),
                _response(body=_completion("Second time lucky.")),
            ]
        )

        with patch(CLIENT_PATH, return_value=client):
            advice = await provider.get_advice("sk-test", "x")

        assert advice == "Second time lucky."
        assert client.post.call_count == 2

    async def test_none_after_retries_exhausted(self, provider: DeepSeekAdviceProvider):
        client = _client(side_effect=httpx.ConnectError("DNS resolution failed"))

        with patch(CLIENT_PATH, return_value=client):
            advice = await provider.get_advice("sk-test", "x")

        assert advice is None
        assert client.post.call_count == 2

    async def test_none_on_timeout(self, provider: DeepSeekAdviceProvider):
        client = _client(side_effect=httpx.ReadTimeout("Read timed out"))

        with patch(CLIENT_PATH, return_value=client):
            assert await provider.get_advice("sk-test", "x") is None

    async def test_http_error_not_retried(self, provider: DeepSeekAdviceProvider):
        client = _client(_response(status_code=401, text='{"error": "invalid api key"}'))

        with patch(CLIENT_PATH, return_value=client):
            advice = await provider.get_advice("bad-key", "x")

        assert advice is None
        assert client.post.call_count == 1

    async def test_none_on_missing_content(self, provider: DeepSeekAdviceProvider):
        client = _client(_response(body={"choices": []}))

        with patch(CLIENT_PATH, return_value=client):
            assert await provider.get_advice("sk-test", "x") is None

    async def test_none_on_invalid_json(self, provider: DeepSeekAdviceProvider):
        response = _response(text="<html>gateway error</html>")
        response.json.side_effect = ValueError("Expecting value")
        client = _client(response)

        with patch(CLIENT_PATH, return_value=client):
            assert await provider.get_advice("sk-test", "x") is None

    async def test_none_on_unexpected_error(self, provider: DeepSeekAdviceProvider):
        client = _client(side_effect=RuntimeError("boom"))

        with patch(CLIENT_PATH, return_value=client):
            assert await provider.get_advice("sk-test", "x") is None

    async def test_client_uses_configured_timeout(self, provider: DeepSeekAdviceProvider):
        client = _client(_response(body=_completion("ok")))

        with patch(CLIENT_PATH, return_value=client) as client_cls:
            await provider.get_advice("sk-test", "x")

        assert client_cls.call_args.kwargs["timeout"] == 5.0
