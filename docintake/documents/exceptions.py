from docintake.pipeline.errors import ErrorCategory, IntakeError


class UnsupportedFormatError(IntakeError):
    """Raised when a document's declared type or extension is not supported."""

    category = ErrorCategory.FILE_TYPE


class FileReadError(IntakeError):
    """Raised when a file cannot be read from disk."""

    category = ErrorCategory.EXTRACTION
