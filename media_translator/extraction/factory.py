from media_translator.config.settings import Settings
from media_translator.extraction.base import BaseTextExtractor
from media_translator.extraction.docx_adapter import DocxAdapter
from media_translator.extraction.extractor import DocumentExtractor
from media_translator.extraction.pdfplumber_adapter import PdfPlumberAdapter
from media_translator.extraction.plain_text_adapter import PlainTextAdapter
from media_translator.extraction.pymupdf_adapter import PyMuPdfAdapter


class DocumentExtractorFactory:
    """Creates a DocumentExtractor with the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> DocumentExtractor:
        engine = settings.pdf_engine.lower()
        pdf_adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if pdf_adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return DocumentExtractor(
            text_adapter=PlainTextAdapter(),
            word_adapter=DocxAdapter(),
            pdf_adapter=pdf_adapter_cls(),
        )
