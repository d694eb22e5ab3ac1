from docintake.extractors.base import BaseExtractor, PageProgress
from docintake.extractors.exceptions import ExtractionError


class PlainTextExtractor(BaseExtractor):
    """Decodes a UTF-8 text file."""

    def extract(self, data: bytes, on_page: PageProgress | None = None) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ExtractionError(
                f"Text file is not valid UTF-8 (byte {exc.start}): {exc.reason}"
            ) from exc
