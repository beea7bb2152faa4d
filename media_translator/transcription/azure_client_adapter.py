import httpx
import openai

from media_translator.errors import ErrorKind, TranscriptionError
from media_translator.logging.logger import Log
from media_translator.transcription.client_base import BaseTranscriptionClient

_AUTH_CODES = frozenset({"invalid_api_key", "Unauthorized", "401"})
_NOT_FOUND_CODES = frozenset({"DeploymentNotFound", "404"})
_RATE_LIMIT_CODES = frozenset({"rate_limit_exceeded", "429"})


class AzureWhisperClientAdapter(BaseTranscriptionClient):
    """Speech-to-text adapter for a Whisper deployment on Azure OpenAI.

    Automatic SDK retries are disabled: rate limits and transient failures
    are reported to the caller, who decides whether to retry.
    """

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        api_version: str,
        timeout_seconds: int,
    ) -> None:
        self._client = openai.AzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            api_version=api_version,
            timeout=timeout_seconds,
            max_retries=0,
        )

    def create_transcription(
        self,
        *,
        model: str,
        file_name: str,
        content: bytes,
        content_type: str | None,
        response_format: str,
        temperature: float,
        language: str | None = None,
    ) -> object:
        upload = (file_name, content, content_type) if content_type else (file_name, content)
        options: dict[str, object] = {"temperature": temperature}
        if language:
            options["language"] = language
        try:
            return self._client.audio.transcriptions.create(
                file=upload,
                model=model,
                response_format=response_format,  # type: ignore[arg-type]
                **options,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranscriptionError(
                "Network error: unable to connect to the transcription service.",
                ErrorKind.NETWORK_ERROR,
            ) from exc
        except openai.APIStatusError as exc:
            raise _map_status_error(exc) from exc
        except openai.APIError as exc:
            raise TranscriptionError(
                f"Transcription failed: {exc.message}", ErrorKind.UNKNOWN_ERROR
            ) from exc


def _map_status_error(exc: openai.APIStatusError) -> TranscriptionError:
    status = exc.status_code
    code = str(exc.code) if exc.code is not None else ""
    Log.warning(f"Transcription service error: {exc.message}", status=status, code=code)

    if status == 401 or code in _AUTH_CODES:
        return TranscriptionError(
            "Authentication failed: invalid Azure OpenAI API key for the transcription service.",
            ErrorKind.AUTH_ERROR,
        )
    if status == 404 or code in _NOT_FOUND_CODES:
        return TranscriptionError(
            "Transcription deployment not found. Check the Whisper deployment name.",
            ErrorKind.CONFIG_ERROR,
        )
    if code == "insufficient_quota":
        return TranscriptionError(
            "Azure OpenAI quota exceeded. Check your subscription.",
            ErrorKind.QUOTA_EXCEEDED,
        )
    if status == 429 or code in _RATE_LIMIT_CODES:
        return TranscriptionError(
            "Too many requests. Please wait a moment and try again.",
            ErrorKind.RATE_LIMITED,
        )
    if status == 400:
        return TranscriptionError(
            f"Bad request: {exc.message}. Check the audio file format and size.",
            ErrorKind.BAD_REQUEST,
        )
    return TranscriptionError(
        f"Transcription failed: {exc.message}", ErrorKind.UNKNOWN_ERROR
    )
