from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class DocumentFormat(str, Enum):
    """Closed set of formats the intake pipeline can decode."""

    PLAIN_TEXT = "plain_text"
    FLOW_DOCUMENT = "flow_document"
    PAGE_DOCUMENT = "page_document"


@dataclass(frozen=True)
class RawDocument:
    """Uploaded bytes plus what the host told us about them."""

    data: bytes
    file_name: str
    media_type: str | None = None

    @property
    def extension(self) -> str:
        return PurePath(self.file_name).suffix.lower()

    @property
    def size_bytes(self) -> int:
        return len(self.data)
