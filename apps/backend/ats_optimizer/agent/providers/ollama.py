import logging
import ollama
from ollama._types import ResponseError as OllamaResponseError

from typing import Any, Dict, Optional
from fastapi.concurrency import run_in_threadpool

from ..exceptions import ProviderError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for local text generation. Needs no API key."""

    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_base_url: Optional[str] = None,
        opts: Optional[Dict[str, Any]] = None
    ):
        self.opts = dict(opts or {})
        self.model = model_name
        self._json_mode = bool(self.opts.pop("json_mode", False))
        # Ollama calls the output cap num_predict
        if "max_tokens" in self.opts:
            self.opts["num_predict"] = self.opts.pop("max_tokens")
        self._client = ollama.Client(host=api_base_url) if api_base_url else ollama.Client()
        self._ensure_model_pulled(model_name)

    def _ensure_model_pulled(self, model_name: str) -> None:
        """
        Ensure model is available locally.
        - If it's already in /api/tags, skip pulling.
        - Raises ProviderError with clear message if model unavailable.
        """
        try:
            installed = [m.model for m in self._client.list().models]
            # "llama3" should match "llama3:latest"
            if model_name in installed or any(m.startswith(model_name) for m in installed):
                logger.debug(f"Ollama model '{model_name}' already installed")
                return
        except Exception as e:
            logger.warning(f"Failed to list Ollama models: {e}")

        try:
            logger.info(f"Pulling Ollama model '{model_name}'...")
            self._client.pull(model_name)
            logger.info(f"Successfully pulled Ollama model '{model_name}'")
        except Exception as e:
            error_msg = (
                f"Ollama model '{model_name}' is unavailable. "
                f"Please run 'ollama pull {model_name}' and restart the backend. "
                f"Original error: {e}"
            )
            logger.error(error_msg)
            raise ProviderError(error_msg) from e

    def _generate_sync(self, prompt: str, options: Dict[str, Any]) -> str:
        """Generate a response from the model synchronously."""
        kwargs: Dict[str, Any] = {}
        if self._json_mode:
            kwargs["format"] = "json"
        try:
            response = self._client.generate(
                prompt=prompt,
                model=self.model,
                options=options,
                **kwargs,
            )
            return response["response"].strip()
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e
        except Exception as e:
            logger.error(f"Ollama sync error: {e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"OllamaProvider ignoring generation_args {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt, self.opts)
