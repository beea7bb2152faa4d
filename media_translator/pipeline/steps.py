from media_translator.errors import InputValidationError
from media_translator.extraction.extractor import DocumentExtractor
from media_translator.logging.logger import Log
from media_translator.media.models import FileClassification
from media_translator.media.validator import FileValidator
from media_translator.pipeline.context import PipelineContext, PipelineStep
from media_translator.transcription.transcriber import Transcriber
from media_translator.translation.translator import Translator

MEDIA_CLASSIFICATIONS = (FileClassification.AUDIO, FileClassification.VIDEO)


class RequireTargetLanguageStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.target_language or not context.target_language.strip():
            raise InputValidationError("Please select a target language.")
        return context


class AnalyzeTextStep(PipelineStep):
    def __init__(self, max_text_length: int) -> None:
        self._max_text_length = max_text_length

    def run(self, context: PipelineContext) -> PipelineContext:
        raw = context.input_text or ""
        text = raw.strip()
        if not text:
            raise InputValidationError("Please enter text to translate.")
        # Pasted text is measured as typed, surrounding whitespace included.
        if len(raw) > self._max_text_length:
            raise InputValidationError(
                f"Text is too long. Please limit to {self._max_text_length:,} characters."
            )
        context.source_text = text
        return context


class ValidateUploadStep(PipelineStep):
    def __init__(self, validator: FileValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.file is None or context.classification is None:
            raise InputValidationError("No file was provided.")
        outcome = self._validator.validate(context.file, context.classification)
        if not outcome.accepted:
            raise InputValidationError(outcome.reason or "The file was rejected.")
        Log.info(
            f"Accepted {context.classification.value} upload {context.file.name}",
            size=context.file.size,
        )
        return context


class ExtractDocumentStep(PipelineStep):
    def __init__(self, extractor: DocumentExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.classification is not FileClassification.DOCUMENT:
            return context
        if context.file is None:
            raise InputValidationError("No file was provided.")
        context.source_text = self._extractor.extract(context.file)
        return context


class TranscribeStep(PipelineStep):
    def __init__(self, transcriber: Transcriber) -> None:
        self._transcriber = transcriber

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.classification not in MEDIA_CLASSIFICATIONS:
            return context
        result = self._transcriber.transcribe(context.file, context.source_language)
        context.transcription = result
        context.source_text = result.text
        return context


class CheckLengthStep(PipelineStep):
    """Keeps empty or oversized extracted text away from the translation client."""

    def __init__(self, max_text_length: int) -> None:
        self._max_text_length = max_text_length

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.source_text.strip():
            raise InputValidationError("No text could be extracted from the input.")
        if len(context.source_text) > self._max_text_length:
            raise InputValidationError(
                "Extracted text is too long. Please use a shorter document or recording "
                f"(max {self._max_text_length:,} characters)."
            )
        return context


class TranslateStep(PipelineStep):
    def __init__(self, translator: Translator) -> None:
        self._translator = translator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.translation = self._translator.translate(
            context.source_text, context.target_language
        )
        return context
