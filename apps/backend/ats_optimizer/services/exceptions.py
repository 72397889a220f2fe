from typing import Optional


class AssessmentError(Exception):
    """
    Base class for every terminal failure of the assessment pipeline.

    ``client_message`` is safe to show to end users. ``detail`` carries the
    underlying cause and is only written to the server log unless
    EXPOSE_ERROR_DETAILS is enabled.
    """

    status_code: int = 500
    client_message: str = "The assessment could not be completed."

    def __init__(self, detail: Optional[str] = None, client_message: Optional[str] = None):
        if client_message is not None:
            self.client_message = client_message
        self.detail = detail
        super().__init__(detail or self.client_message)


class MissingInputError(AssessmentError):
    """Raised when the job description is absent or blank."""

    status_code = 400
    client_message = "Job description is required."


class UnsupportedMediaTypeError(AssessmentError):
    """Raised when an uploaded resume has a media type no extractor handles."""

    status_code = 415

    def __init__(self, media_type: str):
        self.media_type = media_type
        super().__init__(
            detail=f"No extractor registered for media type '{media_type}'",
            client_message=(
                f"Unsupported resume file type '{media_type}'. "
                "Upload a PDF or plain-text file, or paste the resume text."
            ),
        )


class ExtractionFailedError(AssessmentError):
    """Raised when the document extractor could not read the uploaded resume."""

    status_code = 422
    client_message = "The uploaded resume could not be read."

    def __init__(self, media_type: Optional[str] = None, original_error: Optional[str] = None):
        self.media_type = media_type
        self.original_error = original_error
        detail = "Resume extraction failed"
        if media_type:
            detail += f" for '{media_type}'"
        if original_error:
            detail += f": {original_error}"
        super().__init__(detail=detail)


class EmptyResumeContentError(AssessmentError):
    """Raised when no usable resume text remains after resolution."""

    status_code = 400
    client_message = "Resume content is missing or could not be parsed."


class MissingConfigurationError(AssessmentError):
    """Raised when a required secret, such as the LLM API key, is not configured."""

    status_code = 500
    client_message = "Server configuration error: the assessment service is not configured."


class AssessmentServiceError(AssessmentError):
    """Raised when the external model call fails (network, auth, quota, ...)."""

    status_code = 502
    client_message = "The assessment service is currently unavailable. Please try again later."

    def __init__(self, provider: Optional[str] = None, original_error: Optional[str] = None):
        self.provider = provider
        self.original_error = original_error
        detail = "Assessment service call failed"
        if provider:
            detail += f" (provider: {provider})"
        if original_error:
            detail += f": {original_error}"
        super().__init__(detail=detail)


class MalformedResponseError(AssessmentError):
    """Raised when the model response is not valid JSON."""

    status_code = 502
    client_message = "Failed to parse analysis results."


class SchemaViolationError(AssessmentError):
    """Raised when the model response JSON does not match the result schema."""

    status_code = 502
    client_message = "Failed to parse analysis results."

    def __init__(self, errors: Optional[list] = None, detail: Optional[str] = None):
        self.errors = errors or []
        if detail is None:
            detail = "Response did not match the assessment schema: " + "; ".join(
                f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
                for err in self.errors
            )
        super().__init__(detail=detail)
