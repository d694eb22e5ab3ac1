import pytest

from docintake.analysis.exceptions import AnalysisError, AnalysisRateLimitError
from docintake.documents.exceptions import FileReadError, UnsupportedFormatError
from docintake.extractors.exceptions import EmptyDocumentError, ExtractionError
from docintake.pdf.exceptions import PdfExtractionError
from docintake.pipeline.errors import (
    ERROR_TITLES,
    ErrorCategory,
    PipelineFailure,
    classify,
    describe,
)
from docintake.session.exceptions import MissingInputError


class TestClassify:
    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (UnsupportedFormatError("png"), ErrorCategory.FILE_TYPE),
            (ExtractionError("bad"), ErrorCategory.EXTRACTION),
            (PdfExtractionError("bad pdf"), ErrorCategory.EXTRACTION),
            (EmptyDocumentError("void"), ErrorCategory.EXTRACTION),
            (FileReadError("gone"), ErrorCategory.EXTRACTION),
            (MissingInputError("missing"), ErrorCategory.VALIDATION),
            (AnalysisError("down"), ErrorCategory.ANALYSIS),
            (AnalysisRateLimitError("429"), ErrorCategory.ANALYSIS),
        ],
    )
    def test_known_failures(self, exc: Exception, expected: ErrorCategory) -> None:
        assert classify(exc) is expected

    @pytest.mark.parametrize("exc", [RuntimeError("boom"), KeyError("x"), ValueError()])
    def test_uncategorized_failures_are_unknown(self, exc: Exception) -> None:
        assert classify(exc) is ErrorCategory.UNKNOWN


class TestDescribe:
    def test_keeps_message(self) -> None:
        failure = describe(UnsupportedFormatError("Incompatible media"))
        assert failure == PipelineFailure(ErrorCategory.FILE_TYPE, "Incompatible media")

    def test_blank_message_falls_back_per_category(self) -> None:
        failure = describe(AnalysisError())
        assert failure.category is ErrorCategory.ANALYSIS
        assert failure.message.startswith("Compute error")

    @pytest.mark.parametrize(
        ("category", "title"),
        [
            (ErrorCategory.FILE_TYPE, "MEDIA MISMATCH"),
            (ErrorCategory.EXTRACTION, "DECODE ERROR"),
            (ErrorCategory.ANALYSIS, "COMPUTE FAILURE"),
            (ErrorCategory.VALIDATION, "INPUT DEFICIENCY"),
            (ErrorCategory.UNKNOWN, "SYSTEM EXCEPTION"),
        ],
    )
    def test_title_lookup(self, category: ErrorCategory, title: str) -> None:
        assert PipelineFailure(category, "msg").title == title

    def test_every_category_has_a_title(self) -> None:
        assert set(ERROR_TITLES) == set(ErrorCategory)
