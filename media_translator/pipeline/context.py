from abc import ABC, abstractmethod
from dataclasses import dataclass

from media_translator.media.models import FileClassification, UploadedFile
from media_translator.transcription.models import TranscriptionResult
from media_translator.translation.models import TranslationResult


@dataclass(slots=True)
class PipelineContext:
    target_language: str
    file: UploadedFile | None = None
    input_text: str | None = None
    classification: FileClassification | None = None
    source_language: str | None = None
    source_text: str = ""
    transcription: TranscriptionResult | None = None
    translation: TranslationResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
