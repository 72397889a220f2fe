import logging

import fitz  # PyMuPDF
from fastapi.concurrency import run_in_threadpool

from .base import TextExtractor
from .exceptions import ExtractionError

logger = logging.getLogger(__name__)


class PyMuPDFExtractor(TextExtractor):
    """
    PDF text extraction with PyMuPDF.

    The document handle has to be opened from the byte stream and closed
    explicitly once every page has been read.
    """

    def _extract_sync(self, content: bytes) -> str:
        try:
            doc = fitz.open(stream=content, filetype="pdf")
        except Exception as e:
            logger.error(f"PyMuPDF could not open document: {e}")
            raise ExtractionError(f"PyMuPDF - Error opening PDF: {e}") from e
        try:
            return "\n".join(page.get_text("text") for page in doc)
        except Exception as e:
            logger.error(f"PyMuPDF extraction error: {e}")
            raise ExtractionError(f"PyMuPDF - Error reading PDF: {e}") from e
        finally:
            doc.close()

    async def extract_text(self, content: bytes) -> str:
        return await run_in_threadpool(self._extract_sync, content)
