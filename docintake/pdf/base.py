from abc import abstractmethod
from collections.abc import Iterable
from contextlib import AbstractContextManager
from typing import Any, ClassVar

from docintake.extractors.base import BaseExtractor, PageProgress
from docintake.logging.logger import Log
from docintake.pdf.exceptions import PdfExtractionError
from docintake.pdf.layout import assemble_page
from docintake.pdf.models import GlyphRun


class BasePdfExtractor(BaseExtractor):
    """Page-by-page PDF extraction with reading-order reconstruction.

    Adapters open the document, load one page at a time and list that page's
    glyph runs. Each page is released before the next is loaded, so memory
    stays bounded by a single page. Line grouping and ordering are shared so
    every engine yields the same layout.
    """

    engine: ClassVar[str] = "pdf"

    def extract(self, data: bytes, on_page: PageProgress | None = None) -> str:
        try:
            with self._open_document(data) as document:
                total = self._page_count(document)
                chunks: list[str] = []
                for index in range(total):
                    number = index + 1
                    if on_page is not None:
                        on_page(number, total)
                    with self._load_page(document, index) as page:
                        runs = self._glyph_runs(page)
                    page_text = assemble_page(runs)
                    Log.debug(f"Page {number}/{total}: {len(page_text)} chars")
                    if page_text:
                        chunks.append(page_text + "\n")
            return "".join(chunks)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"{self.engine} extraction failed: {exc}") from exc

    @abstractmethod
    def _open_document(self, data: bytes) -> AbstractContextManager[Any]:
        """Open the PDF for the duration of one extraction."""

    @abstractmethod
    def _page_count(self, document: Any) -> int:
        """Number of pages in the opened document."""

    @abstractmethod
    def _load_page(self, document: Any, index: int) -> AbstractContextManager[Any]:
        """Load the zero-based page ``index``; its resources are freed on exit."""

    @abstractmethod
    def _glyph_runs(self, page: Any) -> list[GlyphRun]:
        """Return the positioned text runs of one page, Y measured from the bottom."""


def nonblank_runs(runs: Iterable[GlyphRun]) -> list[GlyphRun]:
    return [run for run in runs if run.text.strip()]
