"""
Tests for the OpenAI client wrapper

The SDK client is replaced by a Mock; no network calls are made.
"""
import time
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from sitefactory.agents.client import OpenAIClient
from sitefactory.models.errors import ApplicationError, ErrorCode, GenerationTransportError


def _response(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(total_tokens=42),
    )


def _sdk(content='{"businessName": "X"}', side_effect=None):
    sdk = Mock()
    sdk.chat.completions.create = Mock(return_value=_response(content), side_effect=side_effect)
    return sdk


class TestGenerateJson:
    """Single call, JSON mode, transport errors normalized"""

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        client = OpenAIClient(api_key="")
        assert client.client is None
        with pytest.raises(ApplicationError) as exc_info:
            await client.generate_json("system", "prompt")
        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR

    def test_sdk_client_gets_timeout_and_no_retries(self):
        with patch("sitefactory.agents.client.OpenAI") as sdk_class:
            client = OpenAIClient(api_key="sk-test", timeout=12)
        sdk_class.assert_called_once_with(api_key="sk-test", max_retries=0, timeout=12)
        assert client.client is sdk_class.return_value
        assert client.timeout == 12

    @pytest.mark.asyncio
    async def test_success(self):
        sdk = _sdk()
        client = OpenAIClient(client=sdk, model="gpt-test", temperature=0.5, timeout=5)

        result = await client.generate_json("system", "prompt")

        assert result == '{"businessName": "X"}'
        kwargs = sdk.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["temperature"] == 0.5
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["messages"][1] == {"role": "user", "content": "prompt"}
        assert sdk.chat.completions.create.call_count == 1

    @pytest.mark.asyncio
    async def test_api_failure_is_transport_error(self):
        client = OpenAIClient(client=_sdk(side_effect=RuntimeError("rate limited")), timeout=5)
        with pytest.raises(GenerationTransportError) as exc_info:
            await client.generate_json("system", "prompt")
        assert "rate limited" in exc_info.value.message
        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_empty_content(self, content):
        client = OpenAIClient(client=_sdk(content=content), timeout=5)
        with pytest.raises(GenerationTransportError):
            await client.generate_json("system", "prompt")

    @pytest.mark.asyncio
    async def test_no_choices(self):
        sdk = Mock()
        sdk.chat.completions.create = Mock(return_value=SimpleNamespace(choices=[], usage=None))
        with pytest.raises(GenerationTransportError):
            await OpenAIClient(client=sdk, timeout=5).generate_json("system", "prompt")

    @pytest.mark.asyncio
    async def test_timeout(self):
        def slow(**kwargs):
            time.sleep(0.3)
            return _response("{}")

        client = OpenAIClient(client=_sdk(side_effect=slow), timeout=0.05)
        with pytest.raises(GenerationTransportError) as exc_info:
            await client.generate_json("system", "prompt")
        assert "timed out" in exc_info.value.message


class TestBuildMessages:
    def test_images_attached_at_low_detail(self):
        messages = OpenAIClient.build_messages("sys", "prompt", ["https://cdn.example/a.webp"])
        content = messages[1]["content"]
        assert content[0] == {"type": "text", "text": "prompt"}
        assert content[1] == {
            "type": "image_url",
            "image_url": {"url": "https://cdn.example/a.webp", "detail": "low"},
        }

    def test_text_only(self):
        messages = OpenAIClient.build_messages("sys", "prompt")
        assert messages[1]["content"] == "prompt"
