import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ....schemas.pydantic import AssessmentResponse, Submission, UploadedDocument
from ....services import AssessmentService

assessment_router = APIRouter()
logger = logging.getLogger(__name__)


@lru_cache
def get_assessment_service() -> AssessmentService:
    """Built once; the PDF extractor is chosen when this first runs."""
    return AssessmentService()


@assessment_router.post(
    "",
    response_model=AssessmentResponse,
    response_model_exclude_none=True,
    summary="Score a resume against a job description",
)
async def create_assessment(
    resume_file: Optional[UploadFile] = File(None, alias="resumeFile"),
    resume_text: Optional[str] = Form(None, alias="resumeText"),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    service: AssessmentService = Depends(get_assessment_service),
) -> AssessmentResponse:
    """
    Accepts a multipart form with either ``resumeFile`` (PDF or plain text)
    or ``resumeText``, plus the required ``jobDescription``.

    Failures are rendered by the registered exception handlers as
    ``{"success": false, "error": "..."}``.
    """
    uploaded_document = None
    if resume_file is not None:
        content = await resume_file.read()
        if content:
            uploaded_document = UploadedDocument(
                content=content,
                media_type=resume_file.content_type or "",
                filename=resume_file.filename,
            )
            logger.info(
                f"Received resume upload '{resume_file.filename}' "
                f"({resume_file.content_type}, {len(content)} bytes)"
            )

    submission = Submission(
        job_description=job_description,
        uploaded_document=uploaded_document,
        pasted_text=resume_text,
    )
    result = await service.run(submission)
    return AssessmentResponse(success=True, data=result)
