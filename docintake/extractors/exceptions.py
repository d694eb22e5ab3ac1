from docintake.pipeline.errors import ErrorCategory, IntakeError


class ExtractionError(IntakeError):
    """Raised when a document cannot be decoded into text."""

    category = ErrorCategory.EXTRACTION


class EmptyDocumentError(ExtractionError):
    """Raised when a document decodes but carries no usable text."""
