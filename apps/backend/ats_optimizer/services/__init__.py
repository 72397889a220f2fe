from .assessment_service import AssessmentService
from .assessment_requester import AssessmentRequester
from .input_resolver import InputResolver
from .result_validator import validate_assessment
from .exceptions import (
    AssessmentError,
    MissingInputError,
    UnsupportedMediaTypeError,
    ExtractionFailedError,
    EmptyResumeContentError,
    MissingConfigurationError,
    AssessmentServiceError,
    MalformedResponseError,
    SchemaViolationError,
)

__all__ = [
    "AssessmentService",
    "AssessmentRequester",
    "InputResolver",
    "validate_assessment",
    "AssessmentError",
    "MissingInputError",
    "UnsupportedMediaTypeError",
    "ExtractionFailedError",
    "EmptyResumeContentError",
    "MissingConfigurationError",
    "AssessmentServiceError",
    "MalformedResponseError",
    "SchemaViolationError",
]
