import io

import docx
from docx.table import Table

from docintake.extractors.base import BaseExtractor, PageProgress
from docintake.extractors.exceptions import ExtractionError


class DocxExtractor(BaseExtractor):
    """Extracts text from a DOCX body in document order using python-docx."""

    def extract(self, data: bytes, on_page: PageProgress | None = None) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            lines: list[str] = []
            for block in document.iter_inner_content():
                if isinstance(block, Table):
                    lines.extend(self._table_lines(block))
                else:
                    lines.append(block.text)
            return "\n".join(lines)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"DOCX extraction failed: {exc}") from exc

    @staticmethod
    def _table_lines(table: Table) -> list[str]:
        lines = []
        for row in table.rows:
            texts: list[str] = []
            previous = None
            for cell in row.cells:
                # merged cells are repeated once per grid column they span
                if cell._tc is previous:
                    continue
                previous = cell._tc
                if cell.text.strip():
                    texts.append(cell.text.strip())
            line = " ".join(texts)
            if line:
                lines.append(line)
        return lines
