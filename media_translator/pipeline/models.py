from dataclasses import dataclass, replace
from enum import Enum

from media_translator.errors import PipelineError
from media_translator.media.models import FileClassification
from media_translator.transcription.models import TranscriptionResult
from media_translator.translation.models import TranslationResult


class StepStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    ERROR = "error"


class RunKind(str, Enum):
    TEXT = "text"
    FILE = "file"


@dataclass(frozen=True)
class ProcessingStep:
    """One user-visible stage of a run."""

    id: str
    title: str
    description: str
    status: StepStatus = StepStatus.PENDING

    def with_status(self, status: StepStatus) -> "ProcessingStep":
        return replace(self, status=status)


ANALYZE = ProcessingStep("analyze", "Text Analysis", "Preparing content for translation")
UPLOAD = ProcessingStep("upload", "File Processing", "Analyzing and extracting content")
TRANSCRIBE = ProcessingStep(
    "transcribe", "Audio Transcription", "Converting speech to text"
)
TRANSLATE = ProcessingStep("translate", "AI Translation", "Translating with the language model")
COMPLETE_TEXT = ProcessingStep("complete", "Complete", "Translation ready")
COMPLETE_FILE = ProcessingStep("complete", "Complete", "Ready for download")

TEXT_RUN_STEPS: tuple[ProcessingStep, ...] = (ANALYZE, TRANSLATE, COMPLETE_TEXT)
DOCUMENT_RUN_STEPS: tuple[ProcessingStep, ...] = (UPLOAD, TRANSLATE, COMPLETE_FILE)
MEDIA_RUN_STEPS: tuple[ProcessingStep, ...] = (UPLOAD, TRANSCRIBE, TRANSLATE, COMPLETE_FILE)


@dataclass(frozen=True)
class ProgressEvent:
    """Emitted on every step transition, carrying the full step snapshot."""

    run_id: str
    step_id: str
    status: StepStatus
    elapsed_seconds: float
    steps: tuple[ProcessingStep, ...]


@dataclass(frozen=True)
class RunResult:
    """Final state of one pipeline run: a full translation or a classified failure."""

    run_id: str
    kind: RunKind
    steps: tuple[ProcessingStep, ...]
    elapsed_seconds: float
    source_text: str | None = None
    classification: FileClassification | None = None
    transcription: TranscriptionResult | None = None
    translation: TranslationResult | None = None
    error: PipelineError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.translation is not None

    @property
    def failed_step(self) -> str | None:
        for step in self.steps:
            if step.status is StepStatus.ERROR:
                return step.id
        return None
