from fastapi import APIRouter

from ....core import settings

health_check = APIRouter()


@health_check.get("/ping", tags=["Health check"], status_code=200)
async def ping():
    """
    Liveness check. Reports whether the model API key is configured without revealing it.
    """
    return {
        "message": "pong",
        "llm_provider": settings.LLM_PROVIDER,
        "llm_api_key_configured": bool(settings.LLM_API_KEY) or settings.LLM_PROVIDER == "ollama",
    }
