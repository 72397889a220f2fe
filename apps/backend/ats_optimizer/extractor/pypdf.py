import io
import logging

from fastapi.concurrency import run_in_threadpool
from pypdf import PdfReader

from .base import TextExtractor
from .exceptions import ExtractionError

logger = logging.getLogger(__name__)


class PypdfExtractor(TextExtractor):
    """PDF text extraction with pypdf; no handle needs closing."""

    def _extract_sync(self, content: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(content))
            return "\n".join(page.extract_text() or "" for page in reader.pages)
        except Exception as e:
            logger.error(f"pypdf extraction error: {e}")
            raise ExtractionError(f"pypdf - Error reading PDF: {e}") from e

    async def extract_text(self, content: bytes) -> str:
        return await run_in_threadpool(self._extract_sync, content)
