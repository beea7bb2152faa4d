from media_translator.errors import ExtractionError
from media_translator.extraction.base import BaseTextExtractor
from media_translator.logging.logger import Log
from media_translator.media.models import UploadedFile

_EMPTY_MESSAGES: dict[str, str] = {
    "txt": "The text file appears to be empty.",
    "doc": "The Word document appears to be empty or contains no readable text.",
    "docx": "The Word document appears to be empty or contains no readable text.",
    "pdf": "The PDF document contains no extractable text.",
}


class DocumentExtractor:
    """Routes a document upload to the adapter for its extension.

    Extensions without a dedicated adapter fall back to UTF-8 decoding.
    """

    def __init__(
        self,
        *,
        text_adapter: BaseTextExtractor,
        word_adapter: BaseTextExtractor,
        pdf_adapter: BaseTextExtractor,
    ) -> None:
        self._text_adapter = text_adapter
        self._adapters: dict[str, BaseTextExtractor] = {
            "txt": text_adapter,
            "doc": word_adapter,
            "docx": word_adapter,
            "pdf": pdf_adapter,
        }

    def extract(self, file: UploadedFile) -> str:
        """Return the document's text.

        Raises:
            ExtractionError: if the text is empty after trimming or the
                             structured format cannot be parsed.
        """
        extension = file.extension
        adapter = self._adapters.get(extension, self._text_adapter)
        output = adapter.extract(file.content, extension)

        for warning in output.warnings:
            Log.warning(f"Extraction warning for {file.name}: {warning}")

        if not output.text.strip():
            raise ExtractionError(
                _EMPTY_MESSAGES.get(extension, "The document appears to be empty.")
            )

        Log.info(f"Extracted {len(output.text)} chars from {file.name}")
        return output.text
