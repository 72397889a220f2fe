import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from ..core import settings
from .exceptions import ProviderConfigurationError
from .providers.base import Provider

logger = logging.getLogger(__name__)


class AgentManager:
    def __init__(self,
                 model: str = settings.LL_MODEL,
                 model_provider: str = settings.LLM_PROVIDER
                 ) -> None:
        self.model = model
        self.model_provider = model_provider

    async def _get_provider(self, **kwargs: Any) -> Provider:
        # Default options for any LLM. Not all can handle them
        # but each provider can make best effort.
        opts = {
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        opts.update(kwargs)
        # Provider constructors do blocking I/O (model pulls, module imports)
        match self.model_provider:
            case 'ollama':
                from .providers.ollama import OllamaProvider
                model = opts.pop("model", self.model)
                return await run_in_threadpool(
                    OllamaProvider,
                    model_name=model,
                    api_base_url=opts.pop("llm_base_url", settings.OLLAMA_BASE_URL),
                    opts=opts,
                )
            case _:
                llm_api_key = opts.pop("llm_api_key", settings.LLM_API_KEY)
                if not llm_api_key:
                    raise ProviderConfigurationError(
                        f"LLM_API_KEY is not set; refusing to call '{self.model_provider}'"
                    )
                llm_api_base_url = opts.pop("llm_base_url", settings.LLM_BASE_URL)
                from .providers.llama_index import LlamaIndexProvider
                try:
                    return await run_in_threadpool(
                        LlamaIndexProvider,
                        api_key=llm_api_key,
                        model_name=self.model,
                        api_base_url=llm_api_base_url,
                        provider=self.model_provider,
                        opts=opts,
                    )
                except (ImportError, AttributeError, ValueError, TypeError) as e:
                    logger.error(f"Cannot build LLM provider '{self.model_provider}': {e}")
                    raise ProviderConfigurationError(
                        f"LLM_PROVIDER '{self.model_provider}' is not usable: {e}"
                    ) from e

    async def run(self, prompt: str, **kwargs: Any) -> str:
        """
        Run the model once with the given prompt and return its raw text.
        """
        provider = await self._get_provider(**kwargs)
        logger.debug(f"Sending {len(prompt)} prompt chars to {self.model_provider}:{self.model}")
        return await provider(prompt)
