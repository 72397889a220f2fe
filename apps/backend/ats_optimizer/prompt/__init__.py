from .resume_assessment import PROMPT, RESPONSE_FORMAT

__all__ = ["PROMPT", "RESPONSE_FORMAT"]
