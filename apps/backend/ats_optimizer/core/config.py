import logging
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "ATS Optimizer"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # "ollama" or a fully-qualified llama_index LLM class name
    LLM_PROVIDER: str = "llama_index.llms.openai_like.OpenAILike"
    LL_MODEL: str = "gemini-flash-latest"
    LLM_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GEMINI_API_KEY"),
    )
    LLM_BASE_URL: Optional[str] = "https://generativelanguage.googleapis.com/v1beta/openai/"
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_TOKENS: int = 4000
    # only used when LLM_PROVIDER is "ollama"; None means the client default
    OLLAMA_BASE_URL: Optional[str] = None

    PDF_EXTRACTOR: str = "pymupdf"
    RESUME_MAX_CHARS: int = 30000
    JOB_DESCRIPTION_MAX_CHARS: int = 10000

    EXPOSE_ERROR_DETAILS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request line at INFO, including the model endpoint
    logging.getLogger("httpx").setLevel(logging.WARNING)
