"""Full dashboard flow in one request: ingest, extract or transcribe, translate.

Each caller owns a session named by the ``X-Session-Id`` header. A new run in
a session clears its previous output, and the session keeps only the newest
run, which ``GET /api/process/{session_id}`` reports.
"""

import uuid

from fastapi import APIRouter, Depends, File, Form, Header, UploadFile
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from media_translator.api.dependencies import get_sessions
from media_translator.api.responses import (
    SESSION_HEADER,
    bad_input_response,
    error_response,
    preflight_response,
    status_for,
)
from media_translator.api.schemas import (
    ProcessResponse,
    SessionStateResponse,
    StepSchema,
    TranslateResponse,
)
from media_translator.logging.logger import Log
from media_translator.media.formats import GLOBAL_MAX_BYTES, format_megabytes
from media_translator.media.models import UploadedFile
from media_translator.pipeline.models import ProcessingStep, RunResult
from media_translator.pipeline.session import SessionStore
from media_translator.transcription.languages import language_name

router = APIRouter()


def _step_schemas(steps: tuple[ProcessingStep, ...]) -> list[StepSchema]:
    return [
        StepSchema(
            id=step.id,
            title=step.title,
            description=step.description,
            status=step.status.value,
        )
        for step in steps
    ]


def _to_response(session_id: str, result: RunResult) -> ProcessResponse:
    translation = None
    if result.translation is not None:
        translation = TranslateResponse(
            translation=result.translation.translated_text,
            original_length=result.translation.original_length,
            translated_length=result.translation.translated_length,
            target_language=result.translation.target_language,
            model=result.translation.model,
        )
    return ProcessResponse(
        session_id=session_id,
        run_id=result.run_id,
        kind=result.kind.value,
        steps=_step_schemas(result.steps),
        elapsed_seconds=round(result.elapsed_seconds, 3),
        classification=result.classification.value if result.classification else None,
        extracted_text=result.source_text,
        detected_language=result.transcription.language if result.transcription else None,
        translation=translation,
        error=result.error.message if result.error else None,
        code=result.error.code if result.error else None,
    )


async def _read_upload(file: UploadFile) -> UploadedFile:
    """Read the upload, unless its declared size already exceeds the ceiling.

    An oversized upload is passed on with its declared size and no content,
    so validation rejects it in the ``upload`` step.
    """
    name = file.filename or ""
    if file.size is not None and file.size > GLOBAL_MAX_BYTES:
        Log.warning(
            f"Skipping read of oversized upload {name}", size=format_megabytes(file.size)
        )
        return UploadedFile(
            content=b"", name=name, size=file.size, content_type=file.content_type
        )
    content = await file.read()
    return UploadedFile.from_bytes(content, name, file.content_type)


@router.post("/process", response_model=ProcessResponse)
async def process_input(
    file: UploadFile | None = File(None, description="Document, audio or video file."),
    text: str | None = Form(None, description="Pasted text, used when no file is sent."),
    target_language: str | None = Form(
        None,
        alias="targetLanguage",
        description="Language name, or a code from GET /api/languages.",
    ),
    source_language: str | None = Form(
        None, alias="sourceLanguage", description="Spoken-language hint for audio and video."
    ),
    session_id: str | None = Header(None, alias=SESSION_HEADER),
    sessions: SessionStore = Depends(get_sessions),
):
    language = language_name((target_language or "").strip())
    if file is None and text is None:
        return bad_input_response("Provide either a file or text to translate")

    session_id = session_id or uuid.uuid4().hex
    session = sessions.get(session_id)
    if file is not None:
        upload = await _read_upload(file)
        result = await run_in_threadpool(
            session.translate_file, upload, language, source_language
        )
    else:
        result = await run_in_threadpool(session.translate_text, text, language)

    response = _to_response(session_id, result)
    if result.error is None:
        return response
    return JSONResponse(
        status_code=status_for(result.error),
        content=response.model_dump(by_alias=True),
    )


@router.get("/process/{session_id}", response_model=SessionStateResponse)
def session_state(session_id: str, sessions: SessionStore = Depends(get_sessions)):
    session = sessions.find(session_id)
    if session is None:
        return error_response(f"Unknown session: {session_id}", "not_found", 404)
    result = session.last_result
    error = result.error if result is not None else None
    return SessionStateResponse(
        session_id=session_id,
        run_id=session.current_run_id,
        steps=_step_schemas(session.steps),
        output=session.output_text,
        error=error.message if error else None,
        code=error.code if error else None,
    )


@router.delete("/process/{session_id}", status_code=204)
def end_session(session_id: str, sessions: SessionStore = Depends(get_sessions)):
    if not sessions.discard(session_id):
        return error_response(f"Unknown session: {session_id}", "not_found", 404)
    return Response(status_code=204)


@router.options("/process", include_in_schema=False)
def process_preflight():
    return preflight_response(headers=f"Content-Type, {SESSION_HEADER}")


@router.options("/process/{session_id}", include_in_schema=False)
def session_preflight():
    return preflight_response(methods="GET, DELETE, OPTIONS")
