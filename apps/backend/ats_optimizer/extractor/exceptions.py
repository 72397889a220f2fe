class ExtractionError(RuntimeError):
    """Raised when a document extractor cannot turn bytes into text"""
