"""
Tests for the LlamaIndex LLM provider.

These tests verify:
1. OpenAI-family classes get api_base, chat mode and JSON response_format
2. Other classes get base_url and no request-level JSON mode
3. Client failures are wrapped as ProviderError
"""

import pytest
from unittest.mock import MagicMock, patch


class FakeLLM:
    """Stands in for a llama_index LLM class; records constructor kwargs."""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.complete = MagicMock(return_value=MagicMock(text='{"score": 50}'))


def _make_provider(classname="OpenAILike", **kwargs):
    from ats_optimizer.agent.providers.llama_index import LlamaIndexProvider

    with patch(
        'ats_optimizer.agent.providers.llama_index._get_real_provider',
        return_value=(FakeLLM, "llama_index.llms.fake", classname),
    ), patch('ats_optimizer.agent.providers.llama_index.BaseLLM', object):
        return LlamaIndexProvider(
            api_key="test-key",
            api_base_url="https://example.invalid/v1/",
            model_name="gemini-flash-latest",
            provider=f"llama_index.llms.fake.{classname}",
            **kwargs,
        )


class TestLlamaIndexProviderConstruction:
    """Tests for the kwargs handed to the underlying LlamaIndex class."""

    def test_openai_like_gets_json_mode_and_chat_flag(self):
        provider = _make_provider(opts={"json_mode": True, "temperature": 0.2, "max_tokens": 4000})
        kwargs = provider._client.kwargs

        assert kwargs["model"] == "gemini-flash-latest"
        assert kwargs["api_key"] == "test-key"
        assert kwargs["api_base"] == "https://example.invalid/v1/"
        assert "base_url" not in kwargs
        assert kwargs["is_chat_model"] is True
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 4000
        assert kwargs["additional_kwargs"] == {"response_format": {"type": "json_object"}}

    def test_json_mode_off_sends_no_response_format(self):
        provider = _make_provider(opts={})

        assert "additional_kwargs" not in provider._client.kwargs

    def test_other_classes_use_base_url_without_response_format(self):
        provider = _make_provider(classname="Anthropic", opts={"json_mode": True})
        kwargs = provider._client.kwargs

        assert kwargs["base_url"] == "https://example.invalid/v1/"
        assert "api_base" not in kwargs
        assert "is_chat_model" not in kwargs
        assert "additional_kwargs" not in kwargs

    def test_empty_provider_string_is_rejected(self):
        from ats_optimizer.agent.providers.llama_index import LlamaIndexProvider

        with pytest.raises(ValueError):
            LlamaIndexProvider(api_key="k", provider="")

    def test_provider_name_must_be_dotted(self):
        from ats_optimizer.agent.providers.llama_index import _get_real_provider

        with pytest.raises(ValueError):
            _get_real_provider("OpenAILike")


class TestLlamaIndexProviderCall:
    """Tests for generation through the provider."""

    @pytest.mark.asyncio
    async def test_call_returns_raw_completion_text(self):
        provider = _make_provider(opts={"json_mode": True})

        result = await provider("prompt text")

        assert result == '{"score": 50}'
        provider._client.complete.assert_called_once_with("prompt text")

    @pytest.mark.asyncio
    async def test_client_error_is_wrapped_as_provider_error(self):
        from ats_optimizer.agent.exceptions import ProviderError

        provider = _make_provider(opts={})
        provider._client.complete.side_effect = RuntimeError("429 quota exceeded")

        with pytest.raises(ProviderError) as exc_info:
            await provider("prompt text")

        assert "429 quota exceeded" in str(exc_info.value)
        assert provider._client.complete.call_count == 1
