from abc import ABC, abstractmethod
from collections.abc import Callable

PageProgress = Callable[[int, int], None]


class BaseExtractor(ABC):
    """Contract for all document text extractors."""

    @abstractmethod
    def extract(self, data: bytes, on_page: PageProgress | None = None) -> str:
        """Extract plain text from raw document bytes.

        Args:
            data: Raw file content.
            on_page: Called with ``(current_page, total_pages)`` before each
                page is processed. Only page-based extractors call it.

        Returns:
            Extracted text; paragraph and page boundaries are newlines.

        Raises:
            ExtractionError: if decoding fails for any reason.
        """
