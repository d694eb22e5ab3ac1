from dataclasses import dataclass
from enum import IntEnum

from docintake.documents.models import DocumentFormat, RawDocument
from docintake.pipeline.errors import PipelineFailure


class ExtractionPhase(IntEnum):
    """Extraction states; values give the only allowed (forward) order."""

    IDLE = 0
    ACQUIRING = 1
    FORMAT_DISPATCH = 2
    EXTRACTING = 3
    SANITIZING = 4
    SUCCESS = 5
    FAILED = 6

    @property
    def is_terminal(self) -> bool:
        return self in (ExtractionPhase.SUCCESS, ExtractionPhase.FAILED)


ACQUIRING_LABEL = "Acquiring file stream..."
FORMAT_DISPATCH_LABEL = "Identifying document format..."
PDF_LOADING_LABEL = "Decoding PDF structure..."
PDF_PAGE_LABEL = "Parsing page {current} of {total}..."
DOCX_PARSING_LABEL = "Unpacking XML schemas..."
TEXT_READING_LABEL = "Reading plain text..."
SANITIZING_LABEL = "Sanitizing textual content..."
SUCCESS_LABEL = "Stream read successful!"

FORMAT_LABELS: dict[DocumentFormat, str] = {
    DocumentFormat.PLAIN_TEXT: TEXT_READING_LABEL,
    DocumentFormat.FLOW_DOCUMENT: DOCX_PARSING_LABEL,
    DocumentFormat.PAGE_DOCUMENT: PDF_LOADING_LABEL,
}


@dataclass(frozen=True)
class ProgressEvent:
    phase: ExtractionPhase
    label: str
    current_page: int | None = None
    total_pages: int | None = None

    @classmethod
    def page(cls, current: int, total: int) -> "ProgressEvent":
        return cls(
            phase=ExtractionPhase.EXTRACTING,
            label=PDF_PAGE_LABEL.format(current=current, total=total),
            current_page=current,
            total_pages=total,
        )


@dataclass(slots=True)
class ExtractionContext:
    run_id: int
    file_name: str
    document: RawDocument | None = None
    format: DocumentFormat | None = None
    raw_text: str = ""
    text: str = ""


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of one pipeline run: sanitized text or a classified failure."""

    run_id: int
    file_name: str
    text: str = ""
    format: DocumentFormat | None = None
    failure: PipelineFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None
