import logging

from .base import TextExtractor
from .exceptions import ExtractionError

logger = logging.getLogger(__name__)


class PlainTextExtractor(TextExtractor):
    """Decodes text/plain uploads verbatim."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    async def extract_text(self, content: bytes) -> str:
        try:
            return content.decode(self._encoding)
        except (LookupError, UnicodeDecodeError) as e:
            logger.error(f"Plain text decode error ({self._encoding}): {e}")
            raise ExtractionError(f"Could not decode text as {self._encoding}: {e}") from e
