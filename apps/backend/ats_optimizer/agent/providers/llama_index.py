"""
LlamaIndex Provider Integration

This module provides LLM integration via LlamaIndex's provider abstraction.

=============================================================================
OPENAI-COMPATIBLE KWARGS REFERENCE
=============================================================================

The default LLM_PROVIDER is "llama_index.llms.openai_like.OpenAILike" pointed
at Gemini's OpenAI-compatible endpoint. The OpenAI family of classes take:

    - model (str)             : Model name, e.g., "gemini-flash-latest"
    - api_key (str)           : Provider API key
    - api_base (str)          : Endpoint base URL (NOT base_url)
    - is_chat_model (bool)    : Must be True for chat-only endpoints
    - temperature (float)     : Sampling temperature
    - max_tokens (int)        : Maximum tokens in response
    - additional_kwargs (dict): Extra request fields; JSON output mode is
                                {"response_format": {"type": "json_object"}}

Other LlamaIndex integrations (Anthropic, ...) take base_url instead of
api_base and have no request-level JSON mode; for those the prompt alone
asks for JSON and the result validator enforces it.

=============================================================================
"""

import logging

from typing import Any, Dict, Optional
from fastapi.concurrency import run_in_threadpool
from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ProviderError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)

_OPENAI_FAMILY = {"OpenAI", "OpenAILike"}


def _get_real_provider(provider_name):
    # The format this method expects is something like:
    # llama_index.llms.openai_like.OpenAILike
    if not isinstance(provider_name, str):
        raise ValueError("provider_name must be a string denoting a fully-qualified Python class name")
    dotpos = provider_name.rfind('.')
    if dotpos < 0:
        raise ValueError("provider_name not correctly formatted")
    classname = provider_name[dotpos+1:]
    modname = provider_name[:dotpos]
    from importlib import import_module
    rm = import_module(modname)
    return getattr(rm, classname), modname, classname


class LlamaIndexProvider(Provider):
    def __init__(self,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 api_base_url: Optional[str] = settings.LLM_BASE_URL,
                 model_name: str = settings.LL_MODEL,
                 provider: str = settings.LLM_PROVIDER,
                 opts: Optional[Dict[str, Any]] = None):
        if opts is None:
            opts = {}
        self.opts = opts
        self._api_key = api_key
        self._api_base_url = api_base_url
        self._model = model_name
        self._provider = provider
        if not provider:
            raise ValueError("Provider string is required")
        provider_obj, self._modname, self._classname = _get_real_provider(provider)
        if not issubclass(provider_obj, BaseLLM):
            raise TypeError("LLM provider must be e.g. a llama_index.llms.* class - a subclass of llama_index.core.base.llms.base.BaseLLM")

        self._client = provider_obj(**self._build_kwargs())

    def _build_kwargs(self) -> Dict[str, Any]:
        kwargs_for_provider: Dict[str, Any] = {
            'model': self._model,
            'api_key': self._api_key,
        }
        openai_family = self._classname in _OPENAI_FAMILY
        if self._api_base_url:
            kwargs_for_provider['api_base' if openai_family else 'base_url'] = self._api_base_url
        if self.opts.get('temperature') is not None:
            kwargs_for_provider['temperature'] = self.opts['temperature']
        if self.opts.get('max_tokens') is not None:
            kwargs_for_provider['max_tokens'] = self.opts['max_tokens']

        if self._classname == 'OpenAILike':
            kwargs_for_provider['is_chat_model'] = True
        if self.opts.get('json_mode'):
            if openai_family:
                kwargs_for_provider['additional_kwargs'] = {
                    'response_format': {'type': 'json_object'},
                }
            else:
                logger.warning(f"{self._classname} has no request-level JSON mode; relying on the prompt")
        return kwargs_for_provider

    def _generate_sync(self, prompt: str) -> str:
        """
        Generate a response from the model.
        """
        try:
            cr = self._client.complete(prompt)
            return cr.text
        except Exception as e:
            logger.error(f"llama_index sync error: {e}")
            raise ProviderError(f"llama_index - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)
