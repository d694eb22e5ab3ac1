from docintake.extractors.exceptions import ExtractionError


class PdfExtractionError(ExtractionError):
    """Raised when a PDF cannot be opened or its page structure parsed."""
