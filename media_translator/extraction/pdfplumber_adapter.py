import io

import pdfplumber

from media_translator.errors import ExtractionError
from media_translator.extraction.base import BaseTextExtractor, ExtractionOutput


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, content: bytes, extension: str = "pdf") -> ExtractionOutput:
        warnings: list[str] = []
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = []
                for number, page in enumerate(pdf.pages, start=1):
                    page_text = page.extract_text() or ""
                    if not page_text.strip():
                        warnings.append(f"Page {number} has no extractable text layer")
                    pages.append(page_text)
        except Exception as exc:
            raise ExtractionError(
                "Failed to parse the PDF document. The file may be corrupted."
            ) from exc
        return ExtractionOutput(text="\n".join(pages).strip(), warnings=warnings)
