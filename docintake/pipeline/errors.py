"""Failure taxonomy shared by every stage of the intake pipeline."""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    FILE_TYPE = "fileType"
    EXTRACTION = "extraction"
    ANALYSIS = "analysis"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


ERROR_TITLES: dict[ErrorCategory, str] = {
    ErrorCategory.FILE_TYPE: "MEDIA MISMATCH",
    ErrorCategory.EXTRACTION: "DECODE ERROR",
    ErrorCategory.ANALYSIS: "COMPUTE FAILURE",
    ErrorCategory.VALIDATION: "INPUT DEFICIENCY",
    ErrorCategory.UNKNOWN: "SYSTEM EXCEPTION",
}

_FALLBACK_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.FILE_TYPE: "Incompatible media: the file is not a recognized profile format.",
    ErrorCategory.EXTRACTION: "Transmission error during extraction.",
    ErrorCategory.ANALYSIS: "Compute error: the analysis engine failed to reach a conclusion.",
    ErrorCategory.VALIDATION: "Requirement missing.",
    ErrorCategory.UNKNOWN: "Unexpected failure.",
}


class IntakeError(Exception):
    """Base exception for every categorized pipeline failure."""

    category: ErrorCategory = ErrorCategory.UNKNOWN


@dataclass(frozen=True)
class PipelineFailure:
    """A classified failure as presented to the user."""

    category: ErrorCategory
    message: str

    @property
    def title(self) -> str:
        return ERROR_TITLES[self.category]


def classify(exc: BaseException) -> ErrorCategory:
    """Map a raised failure to exactly one category.

    Only ``IntakeError`` subclasses carry a category. Anything else is a
    defect outside the known failure paths and is reported as UNKNOWN.
    """
    if isinstance(exc, IntakeError):
        return exc.category
    return ErrorCategory.UNKNOWN


def describe(exc: BaseException) -> PipelineFailure:
    category = classify(exc)
    message = str(exc).strip() or _FALLBACK_MESSAGES[category]
    return PipelineFailure(category=category, message=message)
