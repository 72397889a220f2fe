import logging
from typing import Optional

from ..schemas.pydantic import AssessmentResult, Submission
from .assessment_requester import AssessmentRequester
from .input_resolver import InputResolver
from .result_validator import validate_assessment

logger = logging.getLogger(__name__)


class AssessmentService:
    """
    Runs one submission through resolve -> request -> validate.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        input_resolver: Optional[InputResolver] = None,
        requester: Optional[AssessmentRequester] = None,
    ):
        self.input_resolver = input_resolver or InputResolver()
        self.requester = requester or AssessmentRequester()

    async def run(self, submission: Submission) -> AssessmentResult:
        resume_text = await self.input_resolver.resolve(submission)
        logger.info(f"Resume text length: {len(resume_text)}")

        raw_response = await self.requester.request(resume_text, submission.job_description)
        result = validate_assessment(raw_response)
        logger.info(
            f"Assessment complete: score={result.score}, "
            f"missing_keywords={len(result.missing_keywords)}, "
            f"suggestions={len(result.tailored_suggestions)}"
        )
        return result
