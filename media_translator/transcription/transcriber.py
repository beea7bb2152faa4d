from media_translator.errors import ErrorKind, TranscriptionError
from media_translator.logging.logger import Log
from media_translator.media.formats import (
    TRANSCRIPTION_CONTENT_TYPES,
    TRANSCRIPTION_EXTENSIONS,
    TRANSCRIPTION_MAX_BYTES,
    format_limit,
    format_megabytes,
)
from media_translator.media.models import UploadedFile
from media_translator.transcription.client_base import BaseTranscriptionClient
from media_translator.transcription.languages import find_language, normalize_language_code
from media_translator.transcription.models import TranscriptionResult
from media_translator.transcription.response import PlainTranscript, decode_response


class Transcriber:
    """Turns an audio or video upload into a complete TranscriptionResult."""

    RESPONSE_FORMAT = "verbose_json"
    TEMPERATURE = 0.0

    def __init__(
        self,
        *,
        client: BaseTranscriptionClient,
        model: str,
        max_bytes: int = TRANSCRIPTION_MAX_BYTES,
    ) -> None:
        self._client = client
        self._model = model
        self._max_bytes = max_bytes

    @property
    def model(self) -> str:
        return self._model

    def transcribe(
        self, file: UploadedFile | None, language: str | None = None
    ) -> TranscriptionResult:
        """Transcribe one file.

        ``language`` is an optional ISO 639-1 hint for the spoken language.

        Raises:
            TranscriptionError: kind ``validation_error`` when a precondition
                fails (no request is sent), otherwise the mapped service kind.
        """
        checked = self._check_preconditions(file)
        hint = self._check_language(language)
        Log.info(
            f"Starting transcription for {checked.name}", size=checked.size, language=hint
        )

        raw = self._client.create_transcription(
            model=self._model,
            file_name=checked.name,
            content=checked.content,
            content_type=checked.content_type,
            response_format=self.RESPONSE_FORMAT,
            temperature=self.TEMPERATURE,
            language=hint,
        )
        response = decode_response(raw)

        if isinstance(response, PlainTranscript):
            result = TranscriptionResult(text=response.text)
        else:
            result = TranscriptionResult(
                text=response.text,
                language=response.language,
                duration=response.duration,
                segments=response.segments,
            )
        Log.info(
            f"Transcription completed for {checked.name}: {len(result.text)} chars",
            language=result.language,
        )
        return result

    def _check_preconditions(self, file: UploadedFile | None) -> UploadedFile:
        if file is None:
            raise self._invalid("No audio file provided.")
        if file.size <= 0 or not file.content:
            raise self._invalid("Audio file is empty.")
        self.check_size(file.size)
        content_type = (file.content_type or "").split(";")[0].strip().lower()
        if (
            file.extension not in TRANSCRIPTION_EXTENSIONS
            and content_type not in TRANSCRIPTION_CONTENT_TYPES
        ):
            declared = content_type or (f".{file.extension}" if file.extension else "unknown")
            raise self._invalid(
                f"Unsupported file type: {declared}. Supported formats: "
                f"{', '.join(sorted(TRANSCRIPTION_EXTENSIONS))}."
            )
        return file

    def check_size(self, size: int) -> None:
        """Reject a declared size above the upload ceiling before any bytes are read."""
        if size > self._max_bytes:
            raise self._invalid(
                f"File size ({format_megabytes(size)}) exceeds maximum limit "
                f"of {format_limit(self._max_bytes)}."
            )

    def _check_language(self, language: str | None) -> str | None:
        code = normalize_language_code(language)
        if code is not None and find_language(code) is None:
            raise self._invalid(f"Unsupported transcription language: {language}.")
        return code

    @staticmethod
    def _invalid(message: str) -> TranscriptionError:
        return TranscriptionError(message, ErrorKind.VALIDATION_ERROR)
