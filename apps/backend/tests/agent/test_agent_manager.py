"""
Tests for AgentManager provider routing and the API key check.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from ats_optimizer.agent import AgentManager, ProviderConfigurationError
from ats_optimizer.core import settings


class TestAgentManager:

    @pytest.mark.asyncio
    async def test_missing_api_key_fails_before_building_client(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_API_KEY", None)

        with patch('ats_optimizer.agent.providers.llama_index.LlamaIndexProvider') as provider_cls:
            manager = AgentManager(model="gemini-flash-latest",
                                   model_provider="llama_index.llms.openai_like.OpenAILike")
            with pytest.raises(ProviderConfigurationError):
                await manager.run("prompt")

        provider_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_run_returns_raw_provider_text(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_API_KEY", "secret")
        fake_provider = AsyncMock(return_value='{"score": 1}')

        with patch('ats_optimizer.agent.providers.llama_index.LlamaIndexProvider',
                   return_value=fake_provider) as provider_cls:
            manager = AgentManager(model="gemini-flash-latest",
                                   model_provider="llama_index.llms.openai_like.OpenAILike")
            result = await manager.run("prompt", json_mode=True)

        assert result == '{"score": 1}'
        fake_provider.assert_awaited_once_with("prompt")
        call_kwargs = provider_cls.call_args.kwargs
        assert call_kwargs["api_key"] == "secret"
        assert call_kwargs["opts"]["json_mode"] is True
        assert call_kwargs["opts"]["temperature"] == settings.LLM_TEMPERATURE

    @pytest.mark.asyncio
    async def test_ollama_needs_no_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_API_KEY", None)
        fake_provider = AsyncMock(return_value="{}")

        with patch('ats_optimizer.agent.providers.ollama.OllamaProvider',
                   return_value=fake_provider) as provider_cls:
            manager = AgentManager(model="llama3", model_provider="ollama")
            assert await manager.run("prompt", json_mode=True) == "{}"

        assert provider_cls.call_args.kwargs["model_name"] == "llama3"
        assert provider_cls.call_args.kwargs["opts"]["json_mode"] is True

    @pytest.mark.asyncio
    async def test_ollama_uses_configured_host(self, monkeypatch):
        monkeypatch.setattr(settings, "OLLAMA_BASE_URL", "http://ollama.internal:11434")
        fake_provider = AsyncMock(return_value="{}")

        with patch('ats_optimizer.agent.providers.ollama.OllamaProvider',
                   return_value=fake_provider) as provider_cls:
            manager = AgentManager(model="llama3", model_provider="ollama")
            await manager.run("prompt")

        assert provider_cls.call_args.kwargs["api_base_url"] == "http://ollama.internal:11434"

    @pytest.mark.asyncio
    async def test_provider_is_built_off_the_event_loop(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_API_KEY", None)
        fake_provider = AsyncMock(return_value="{}")
        threadpool = AsyncMock(return_value=fake_provider)

        with patch('ats_optimizer.agent.manager.run_in_threadpool', threadpool), \
                patch('ats_optimizer.agent.providers.ollama.OllamaProvider') as provider_cls:
            manager = AgentManager(model="llama3", model_provider="ollama")
            assert await manager.run("prompt") == "{}"

        threadpool.assert_awaited_once()
        assert threadpool.call_args.args[0] is provider_cls
        provider_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_unimportable_provider_class_is_a_configuration_error(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_API_KEY", "secret")
        manager = AgentManager(model="gemini-flash-latest",
                               model_provider="llama_index.llms.not_installed.Nope")

        with pytest.raises(ProviderConfigurationError) as exc_info:
            await manager.run("prompt")

        assert "llama_index.llms.not_installed.Nope" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_malformed_provider_name_is_a_configuration_error(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_API_KEY", "secret")
        manager = AgentManager(model="gemini-flash-latest", model_provider="OpenAILike")

        with pytest.raises(ProviderConfigurationError):
            await manager.run("prompt")
