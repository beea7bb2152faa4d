from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationResult:
    """Output of one translation call."""

    translated_text: str
    original_length: int
    translated_length: int
    target_language: str
    model: str
