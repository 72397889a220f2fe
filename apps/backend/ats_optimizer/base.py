import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api import v1_router
from .core import settings, setup_logging
from .core.exceptions import (
    assessment_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from .services.exceptions import AssessmentError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.LLM_PROVIDER != "ollama" and not settings.LLM_API_KEY:
        logger.warning("LLM_API_KEY is not set; assessment requests will fail until it is configured")
    logger.info(f"{settings.PROJECT_NAME} started with {settings.LLM_PROVIDER}:{settings.LL_MODEL}")
    yield


def create_app() -> FastAPI:
    """
    configure and create the FastAPI application instance.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AssessmentError, assessment_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(v1_router)

    return app
