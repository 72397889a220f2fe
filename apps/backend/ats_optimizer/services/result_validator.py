import json
import logging

from pydantic import ValidationError

from ..schemas.pydantic import AssessmentResult
from .exceptions import MalformedResponseError, SchemaViolationError

logger = logging.getLogger(__name__)


def validate_assessment(raw_text: str) -> AssessmentResult:
    """
    Parse the model's raw response and check it against ``AssessmentResult``.

    Validation is strict and one-shot; malformed output is never repaired.
    """
    try:
        payload = json.loads(raw_text)
    except (TypeError, json.JSONDecodeError) as e:
        logger.error(f"JSON parse error: {e}; raw response: {raw_text!r}")
        raise MalformedResponseError(f"Model response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        logger.error(f"Expected a JSON object, got {type(payload).__name__}: {raw_text!r}")
        raise SchemaViolationError(detail=f"Expected a JSON object, got {type(payload).__name__}")

    try:
        return AssessmentResult.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Schema validation error: {e}; raw response: {raw_text!r}")
        raise SchemaViolationError(errors=e.errors()) from e
