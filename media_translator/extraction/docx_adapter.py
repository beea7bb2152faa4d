"""Word-processor text extraction built on python-docx."""

import io

import docx
from docx.table import Table

from media_translator.errors import ExtractionError
from media_translator.extraction.base import BaseTextExtractor, ExtractionOutput


class DocxAdapter(BaseTextExtractor):
    """Walks the document body in order and returns paragraph and table text.

    Legacy binary ``.doc`` files are attempted as well; python-docx only reads
    the OOXML container, so a true legacy file fails with ExtractionError.
    """

    def extract(self, content: bytes, extension: str = "") -> ExtractionOutput:
        warnings: list[str] = []
        if extension == "doc":
            warnings.append(
                "Legacy .doc format detected; convert to .docx for reliable extraction"
            )
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as exc:
            raise ExtractionError(
                "Failed to parse the Word document. The file may be corrupted "
                "or in an unsupported format."
            ) from exc

        lines: list[str] = []
        table_count = 0
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                table_count += 1
                lines.extend(self._table_lines(block, table_count, warnings))
            else:
                lines.append(block.text)
        return ExtractionOutput(text="\n".join(lines), warnings=warnings)

    @staticmethod
    def _table_lines(table: Table, number: int, warnings: list[str]) -> list[str]:
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if any(cells):
                rows.append("\t".join(cells))
        if not rows:
            warnings.append(f"Table {number} contains no text")
            return []
        return ["", *rows]
