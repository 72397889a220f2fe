from abc import ABC, abstractmethod


class TextExtractor(ABC):
    """
    Narrow interface every document extractor is adapted to.

    Implementations raise ``ExtractionError`` on any failure of the
    underlying library.
    """

    @abstractmethod
    async def extract_text(self, content: bytes) -> str: ...
