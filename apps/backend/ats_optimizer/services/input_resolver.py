import logging
from typing import Optional

from ..extractor import ExtractionError, ExtractorManager, parse_media_type
from ..schemas.pydantic import Submission
from .exceptions import (
    EmptyResumeContentError,
    ExtractionFailedError,
    MissingInputError,
    UnsupportedMediaTypeError,
)

logger = logging.getLogger(__name__)


class InputResolver:
    """
    Turns a submission into plain, non-empty resume text.
    """

    def __init__(self, extractor_manager: Optional[ExtractorManager] = None):
        self.extractor_manager = extractor_manager or ExtractorManager()

    async def resolve(self, submission: Submission) -> str:
        """
        Returns the resume text for ``submission``.

        Raises:
            MissingInputError: job description absent or blank.
            UnsupportedMediaTypeError: uploaded file type has no extractor.
            ExtractionFailedError: the extractor raised.
            EmptyResumeContentError: nothing but whitespace was resolved.
        """
        if not submission.job_description or not submission.job_description.strip():
            raise MissingInputError("Submission has no job description")

        document = submission.uploaded_document
        if document is not None and document.content:
            resume_text = await self._extract(document.content, document.media_type)
        else:
            resume_text = submission.pasted_text or ""

        if not resume_text.strip():
            raise EmptyResumeContentError("Resume text is empty after parsing")
        return resume_text

    async def _extract(self, content: bytes, media_type: str) -> str:
        extractor = self.extractor_manager.get_extractor(media_type)
        if extractor is None:
            raise UnsupportedMediaTypeError(parse_media_type(media_type)[0] or "unknown")
        try:
            text = await extractor.extract_text(content)
        except ExtractionError as e:
            raise ExtractionFailedError(media_type=media_type, original_error=str(e)) from e
        logger.debug(f"Extracted {len(text)} chars from {len(content)} byte {media_type} upload")
        return text
