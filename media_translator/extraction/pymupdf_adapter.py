import pymupdf

from media_translator.errors import ExtractionError
from media_translator.extraction.base import BaseTextExtractor, ExtractionOutput


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, content: bytes, extension: str = "pdf") -> ExtractionOutput:
        warnings: list[str] = []
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = []
                for page in doc:
                    page_text = page.get_text()
                    if not page_text.strip():
                        warnings.append(
                            f"Page {page.number + 1} has no extractable text layer"
                        )
                    pages.append(page_text)
        except Exception as exc:
            raise ExtractionError(
                "Failed to parse the PDF document. The file may be corrupted."
            ) from exc
        return ExtractionOutput(text="\n".join(pages).strip(), warnings=warnings)
