from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExtractionOutput:
    """Raw text plus non-fatal problems noticed while walking the document."""

    text: str
    warnings: list[str] = field(default_factory=list)


class BaseTextExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, content: bytes, extension: str = "") -> ExtractionOutput:
        """Extract plain text from file bytes.

        Args:
            content: Raw file content.
            extension: Lower-cased file extension, for adapters that cover
                       more than one format.

        Returns:
            ExtractionOutput with the text and any non-fatal warnings.

        Raises:
            ExtractionError: if the content cannot be parsed.
        """
