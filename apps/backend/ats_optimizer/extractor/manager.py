import logging
from typing import Optional

from ..core import settings
from .base import TextExtractor
from .plain_text import PlainTextExtractor

logger = logging.getLogger(__name__)


def _build_pdf_extractor(name: str) -> TextExtractor:
    match name.lower().strip():
        case 'pymupdf':
            from .pymupdf import PyMuPDFExtractor
            return PyMuPDFExtractor()
        case 'pypdf':
            from .pypdf import PypdfExtractor
            return PypdfExtractor()
        case _:
            raise ValueError(f"Unknown PDF_EXTRACTOR '{name}'; expected 'pymupdf' or 'pypdf'")


def parse_media_type(media_type: Optional[str]) -> tuple[str, dict[str, str]]:
    """
    Split a Content-Type value into its lowercased essence and parameters.

    >>> parse_media_type("Text/Plain; charset=latin-1")
    ('text/plain', {'charset': 'latin-1'})
    """
    if not media_type:
        return "", {}
    essence, *raw_params = media_type.split(";")
    params = {}
    for raw in raw_params:
        key, sep, value = raw.partition("=")
        if sep:
            params[key.strip().lower()] = value.strip().strip('"')
    return essence.strip().lower(), params


class ExtractorManager:
    """
    Routes uploaded documents to the extractor for their media type.

    The PDF adapter is picked once, when the manager is built.
    """

    def __init__(self, pdf_extractor: Optional[str] = None) -> None:
        self._pdf_extractor_name = pdf_extractor or settings.PDF_EXTRACTOR
        self._pdf_extractor = _build_pdf_extractor(self._pdf_extractor_name)
        logger.info(f"Using '{self._pdf_extractor_name}' for PDF extraction")

    def get_extractor(self, media_type: Optional[str]) -> Optional[TextExtractor]:
        """
        Return the extractor for ``media_type`` or None when it is unsupported.
        """
        essence, params = parse_media_type(media_type)
        match essence:
            case 'application/pdf':
                return self._pdf_extractor
            case 'text/plain':
                return PlainTextExtractor(encoding=params.get("charset", "utf-8"))
            case _:
                return None
