from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pymupdf

from docintake.pdf.base import BasePdfExtractor, nonblank_runs
from docintake.pdf.models import GlyphRun


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text spans with their baseline origin using PyMuPDF."""

    engine = "pymupdf"

    @contextmanager
    def _open_document(self, data: bytes) -> Iterator[Any]:
        with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            yield doc

    def _page_count(self, document: Any) -> int:
        return int(document.page_count)

    @contextmanager
    def _load_page(self, document: Any, index: int) -> Iterator[Any]:
        # PyMuPDF frees a page once its last reference is dropped.
        yield document.load_page(index)

    def _glyph_runs(self, page: Any) -> list[GlyphRun]:
        height = float(page.rect.height)
        return nonblank_runs(self._spans(page.get_text("dict"), height))

    @staticmethod
    def _spans(content: dict[str, Any], height: float) -> Iterator[GlyphRun]:
        for block in content.get("blocks", []):
            # type 1 blocks are images
            if block.get("type", 0) != 0:
                continue
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    x, baseline = span["origin"]
                    yield GlyphRun(text=span["text"], x=float(x), y=height - float(baseline))
