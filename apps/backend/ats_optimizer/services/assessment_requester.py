import logging
from typing import Optional

from ..agent import AgentManager, ProviderConfigurationError, ProviderError
from ..core import settings
from ..prompt import PROMPT, RESPONSE_FORMAT
from .exceptions import AssessmentServiceError, MissingConfigurationError

logger = logging.getLogger(__name__)


class AssessmentRequester:
    """
    Builds the recruiter prompt and makes a single call to the model in JSON mode.
    """

    def __init__(
        self,
        agent_manager: Optional[AgentManager] = None,
        resume_max_chars: Optional[int] = None,
        job_description_max_chars: Optional[int] = None,
    ):
        self.agent_manager = agent_manager or AgentManager()
        self.resume_max_chars = resume_max_chars or settings.RESUME_MAX_CHARS
        self.job_description_max_chars = job_description_max_chars or settings.JOB_DESCRIPTION_MAX_CHARS

    def build_prompt(self, resume_text: str, job_description: str) -> str:
        return PROMPT.format(
            RESPONSE_FORMAT,
            resume_text[: self.resume_max_chars],
            job_description[: self.job_description_max_chars],
        )

    async def request(self, resume_text: str, job_description: str) -> str:
        """
        Returns the raw response text. No retry is attempted.
        """
        prompt = self.build_prompt(resume_text, job_description)
        try:
            return await self.agent_manager.run(prompt, json_mode=True)
        except ProviderConfigurationError as e:
            raise MissingConfigurationError(str(e)) from e
        except ProviderError as e:
            raise AssessmentServiceError(
                provider=self.agent_manager.model_provider,
                original_error=str(e),
            ) from e
