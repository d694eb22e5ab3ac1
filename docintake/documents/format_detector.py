from docintake.documents.exceptions import UnsupportedFormatError
from docintake.documents.models import DocumentFormat, RawDocument

PLAIN_TEXT_MEDIA_TYPE = "text/plain"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MEDIA_TYPE = "application/pdf"

# Some hosts send nothing (or a generic binary type) for files they do not
# recognise; only then is the file extension consulted.
AMBIGUOUS_MEDIA_TYPES = frozenset({"", "application/octet-stream", "binary/octet-stream"})


class FormatDetector:
    """Classifies a document by declared media type, falling back to extension."""

    MEDIA_TYPES: dict[str, DocumentFormat] = {
        PLAIN_TEXT_MEDIA_TYPE: DocumentFormat.PLAIN_TEXT,
        DOCX_MEDIA_TYPE: DocumentFormat.FLOW_DOCUMENT,
        PDF_MEDIA_TYPE: DocumentFormat.PAGE_DOCUMENT,
    }
    EXTENSIONS: dict[str, DocumentFormat] = {
        ".txt": DocumentFormat.PLAIN_TEXT,
        ".docx": DocumentFormat.FLOW_DOCUMENT,
        ".pdf": DocumentFormat.PAGE_DOCUMENT,
    }

    def detect(self, document: RawDocument) -> DocumentFormat:
        """Return the document's format without touching its bytes.

        Raises:
            UnsupportedFormatError: if neither the declared type nor (when the
                type is absent or ambiguous) the extension is recognised.
        """
        media_type = self._normalize_media_type(document.media_type)
        if media_type not in AMBIGUOUS_MEDIA_TYPES:
            fmt = self.MEDIA_TYPES.get(media_type)
            if fmt is None:
                raise self._unsupported(document)
            return fmt

        fmt = self.EXTENSIONS.get(document.extension)
        if fmt is None:
            raise self._unsupported(document)
        return fmt

    @staticmethod
    def _normalize_media_type(media_type: str | None) -> str:
        if not media_type:
            return ""
        return media_type.split(";", 1)[0].strip().lower()

    @staticmethod
    def _unsupported(document: RawDocument) -> UnsupportedFormatError:
        label = document.extension.lstrip(".") or document.media_type or "unknown"
        return UnsupportedFormatError(
            f'Incompatible media: "{label}" is not a recognized profile format. '
            "Upload a PDF, DOCX or TXT file."
        )
