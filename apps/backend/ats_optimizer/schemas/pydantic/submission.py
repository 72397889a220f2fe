from typing import Optional

from pydantic import BaseModel, ConfigDict


class UploadedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: bytes
    media_type: str
    filename: Optional[str] = None


class Submission(BaseModel):
    """
    One incoming assessment request. ``pasted_text`` is only consulted when
    no document was uploaded.
    """

    model_config = ConfigDict(frozen=True)

    job_description: Optional[str] = None
    uploaded_document: Optional[UploadedDocument] = None
    pasted_text: Optional[str] = None
