import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pdfplumber

from docintake.pdf.base import BasePdfExtractor, nonblank_runs
from docintake.pdf.models import GlyphRun


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts positioned words from PDF pages using pdfplumber."""

    engine = "pdfplumber"

    @contextmanager
    def _open_document(self, data: bytes) -> Iterator[Any]:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            yield pdf

    def _page_count(self, document: Any) -> int:
        return len(document.pages)

    @contextmanager
    def _load_page(self, document: Any, index: int) -> Iterator[Any]:
        page = document.pages[index]
        try:
            yield page
        finally:
            # Drops the page's parsed layout objects and cached word map.
            page.close()

    def _glyph_runs(self, page: Any) -> list[GlyphRun]:
        origin_y = float(page.mediabox[1])
        return nonblank_runs(
            GlyphRun(text=word["text"], x=float(word["x0"]), y=_baseline(word) - origin_y)
            for word in page.extract_words(return_chars=True)
        )


def _baseline(word: dict[str, Any]) -> float:
    # The first glyph's text matrix holds the baseline in bottom-origin PDF
    # space; a word's "bottom" edge also includes the font's descent.
    return float(word["chars"][0]["matrix"][5])
