from pathlib import Path

import pytest

from docintake.documents.exceptions import FileReadError
from docintake.documents.file_loader import FileLoader


class TestFileLoader:
    def test_reads_absolute_path(self, tmp_path: Path) -> None:
        path = tmp_path / "cv.pdf"
        path.write_bytes(b"%PDF-1.4")
        document = FileLoader().load(path, "application/pdf")
        assert document.data == b"%PDF-1.4"
        assert document.file_name == "cv.pdf"
        assert document.media_type == "application/pdf"

    def test_resolves_relative_path_against_root(self, tmp_path: Path) -> None:
        (tmp_path / "uploads").mkdir()
        (tmp_path / "uploads" / "cv.txt").write_text("hi")
        document = FileLoader(files_root=tmp_path).load("uploads/cv.txt")
        assert document.data == b"hi"
        assert document.media_type is None

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="File not found"):
            FileLoader().load(tmp_path / "missing.txt")
