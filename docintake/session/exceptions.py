from docintake.pipeline.errors import ErrorCategory, IntakeError


class MissingInputError(IntakeError):
    """Raised when a required field is empty at submission time."""

    category = ErrorCategory.VALIDATION
