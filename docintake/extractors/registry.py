from typing import assert_never

from docintake.documents.models import DocumentFormat
from docintake.extractors.base import BaseExtractor


class ExtractorRegistry:
    """Closed dispatch from a detected format to its extractor."""

    def __init__(
        self,
        *,
        plain_text: BaseExtractor,
        flow_document: BaseExtractor,
        page_document: BaseExtractor,
    ) -> None:
        self._plain_text = plain_text
        self._flow_document = flow_document
        self._page_document = page_document

    def for_format(self, fmt: DocumentFormat) -> BaseExtractor:
        match fmt:
            case DocumentFormat.PLAIN_TEXT:
                return self._plain_text
            case DocumentFormat.FLOW_DOCUMENT:
                return self._flow_document
            case DocumentFormat.PAGE_DOCUMENT:
                return self._page_document
            case _:
                assert_never(fmt)
