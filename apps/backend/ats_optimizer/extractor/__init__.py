from .base import TextExtractor
from .exceptions import ExtractionError
from .manager import ExtractorManager, parse_media_type

__all__ = [
    "TextExtractor",
    "ExtractionError",
    "ExtractorManager",
    "parse_media_type",
]
