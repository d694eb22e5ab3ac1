from docintake.pipeline.errors import ErrorCategory, IntakeError


class AnalysisError(IntakeError):
    """Raised when the analysis collaborator fails to produce a report."""

    category = ErrorCategory.ANALYSIS


class AnalysisValidationError(AnalysisError):
    """Raised when the analysis response fails structural validation."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisRateLimitError(AnalysisNetworkError):
    """Raised when the AI provider rejects the call with HTTP 429."""
