from .assessment import AssessmentResult, AssessmentResponse
from .submission import Submission, UploadedDocument

__all__ = [
    "AssessmentResult",
    "AssessmentResponse",
    "Submission",
    "UploadedDocument",
]
