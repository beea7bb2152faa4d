import time
import uuid
from collections.abc import Callable, Sequence

from media_translator.errors import PipelineError
from media_translator.extraction.extractor import DocumentExtractor
from media_translator.logging.logger import Log
from media_translator.media.classifier import classify
from media_translator.media.formats import MAX_TEXT_LENGTH
from media_translator.media.models import UploadedFile
from media_translator.media.validator import FileValidator
from media_translator.pipeline.context import PipelineContext, PipelineStep
from media_translator.pipeline.models import (
    DOCUMENT_RUN_STEPS,
    MEDIA_RUN_STEPS,
    TEXT_RUN_STEPS,
    ProcessingStep,
    RunKind,
    RunResult,
)
from media_translator.pipeline.progress import ProgressListener, ProgressTracker
from media_translator.pipeline.steps import (
    MEDIA_CLASSIFICATIONS,
    AnalyzeTextStep,
    CheckLengthStep,
    ExtractDocumentStep,
    RequireTargetLanguageStep,
    TranscribeStep,
    TranslateStep,
    ValidateUploadStep,
)
from media_translator.transcription.transcriber import Transcriber
from media_translator.translation.translator import Translator

Stage = tuple[str, list[PipelineStep]]


class Orchestrator:
    """Drives a text or file run through its stages and reports progress."""

    def __init__(
        self,
        *,
        validator: FileValidator,
        extractor: DocumentExtractor,
        transcriber: Transcriber,
        translator: Translator,
        max_text_length: int = MAX_TEXT_LENGTH,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._require_language = RequireTargetLanguageStep()
        self._analyze = AnalyzeTextStep(max_text_length)
        self._validate_upload = ValidateUploadStep(validator)
        self._extract = ExtractDocumentStep(extractor)
        self._transcribe = TranscribeStep(transcriber)
        self._check_length = CheckLengthStep(max_text_length)
        self._translate = TranslateStep(translator)

    def translate_text(
        self,
        text: str,
        target_language: str,
        listener: ProgressListener | None = None,
        run_id: str | None = None,
    ) -> RunResult:
        context = PipelineContext(target_language=target_language, input_text=text)
        stages: list[Stage] = [
            ("analyze", [self._require_language, self._analyze]),
            ("translate", [self._check_length, self._translate]),
            ("complete", []),
        ]
        return self._execute(
            RunKind.TEXT, TEXT_RUN_STEPS, stages, context, listener, run_id
        )

    def translate_file(
        self,
        file: UploadedFile,
        target_language: str,
        listener: ProgressListener | None = None,
        run_id: str | None = None,
        source_language: str | None = None,
    ) -> RunResult:
        """Run an upload through the pipeline.

        ``source_language`` is forwarded to transcription as a spoken-language
        hint and ignored for documents.
        """
        classification = classify(file.name, file.content_type)
        context = PipelineContext(
            target_language=target_language,
            file=file,
            classification=classification,
            source_language=source_language,
        )
        stages: list[Stage] = [
            ("upload", [self._require_language, self._validate_upload, self._extract]),
        ]
        if classification in MEDIA_CLASSIFICATIONS:
            steps = MEDIA_RUN_STEPS
            stages.append(("transcribe", [self._transcribe]))
        else:
            steps = DOCUMENT_RUN_STEPS
        stages.append(("translate", [self._check_length, self._translate]))
        stages.append(("complete", []))
        return self._execute(RunKind.FILE, steps, stages, context, listener, run_id)

    def _execute(
        self,
        kind: RunKind,
        steps: Sequence[ProcessingStep],
        stages: list[Stage],
        context: PipelineContext,
        listener: ProgressListener | None,
        run_id: str | None,
    ) -> RunResult:
        run_id = run_id or uuid.uuid4().hex
        tracker = ProgressTracker(steps, run_id, listener=listener, clock=self._clock)
        Log.info(f"Starting {kind.value} run", run_id=run_id)
        tracker.start()

        error: PipelineError | None = None
        try:
            for step_id, pipeline_steps in stages:
                for step in pipeline_steps:
                    context = step.run(context)
                tracker.complete(step_id)
        except PipelineError as exc:
            failed_step = tracker.fail()
            Log.error(
                f"Run failed at step '{failed_step}': {exc.message}",
                run_id=run_id,
                code=exc.code,
            )
            error = exc
        except Exception:
            failed_step = tracker.fail()
            Log.exception(f"Run crashed at step '{failed_step}'", run_id=run_id)
            raise

        elapsed = tracker.elapsed_seconds()
        if error is None:
            Log.info(f"Run completed in {elapsed:.1f}s", run_id=run_id)
        return RunResult(
            run_id=run_id,
            kind=kind,
            steps=tracker.snapshot(),
            elapsed_seconds=elapsed,
            source_text=context.source_text or None,
            classification=context.classification,
            transcription=context.transcription,
            translation=context.translation,
            error=error,
        )
