from pathlib import Path

from docintake.documents.exceptions import FileReadError
from docintake.documents.models import RawDocument


class FileLoader:
    """Reads a document from disk into a RawDocument."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    def load(self, path: Path | str, media_type: str | None = None) -> RawDocument:
        """Read document bytes from disk.

        The declared media type is optional; without it the format detector
        falls back to the file extension.

        Raises:
            FileReadError: if the file is missing or cannot be read.
        """
        resolved = self._resolve_path(Path(path))
        if not resolved.exists():
            raise FileReadError(f"File not found: {resolved}")
        try:
            data = resolved.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {resolved.name}: {exc}") from exc
        return RawDocument(data=data, file_name=resolved.name, media_type=media_type)

    def _resolve_path(self, path: Path) -> Path:
        if self._files_root is None or path.is_absolute():
            return path
        return self._files_root / path
