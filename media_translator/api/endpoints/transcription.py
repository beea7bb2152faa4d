from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool

from media_translator.api.dependencies import get_transcriber
from media_translator.api.responses import (
    error_response,
    pipeline_error_response,
    preflight_response,
)
from media_translator.api.schemas import TranscribeResponse, TranscriptionMetadata
from media_translator.errors import ErrorKind, TranscriptionError
from media_translator.logging.logger import Log
from media_translator.media.models import UploadedFile
from media_translator.transcription.transcriber import Transcriber

router = APIRouter()

TRANSCRIBE_STATUSES = frozenset({400, 401})


@router.post("/transcribe", response_model=TranscribeResponse)
async def transcribe_audio(
    audio: UploadFile | None = File(None, description="Audio or video file to transcribe."),
    language: str | None = Form(
        None, description="ISO 639-1 code of the spoken language; detected when omitted."
    ),
    transcriber: Transcriber = Depends(get_transcriber),
):
    if audio is None:
        return error_response(
            "No audio file provided", ErrorKind.VALIDATION_ERROR.value, 400
        )

    try:
        # Multipart parsing records the size before the upload is read.
        if audio.size is not None:
            transcriber.check_size(audio.size)
        content = await audio.read()
        file = UploadedFile.from_bytes(content, audio.filename or "", audio.content_type)
        Log.info(f"Transcription request for {file.name}", size=file.size)
        result = await run_in_threadpool(transcriber.transcribe, file, language)
    except TranscriptionError as exc:
        Log.error(f"Transcription request failed: {exc.message}", code=exc.code)
        return pipeline_error_response(exc, TRANSCRIBE_STATUSES)

    return TranscribeResponse(
        transcription=result.text,
        language=result.language,
        duration=result.duration,
        metadata=TranscriptionMetadata(
            filename=file.name, size=file.size, format=file.extension or None
        ),
    )


@router.options("/transcribe", include_in_schema=False)
def transcribe_preflight():
    return preflight_response()
