import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from ..schemas.pydantic import AssessmentResponse
from ..services.exceptions import AssessmentError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = AssessmentResponse(success=False, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def assessment_exception_handler(request: Request, exc: AssessmentError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed with {type(exc).__name__}: {exc.detail or exc.client_message}")
    else:
        logger.warning(f"{request.url.path} rejected with {type(exc).__name__}: {exc.detail or exc.client_message}")

    message = exc.client_message
    if settings.EXPOSE_ERROR_DETAILS and exc.detail:
        message = exc.detail
    return _error_response(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.url.path} received an invalid request: {exc.errors()}")
    return _error_response(422, "Invalid request.")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    message = "An unexpected error occurred."
    if settings.EXPOSE_ERROR_DETAILS:
        message = str(exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
