from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from media_translator.api.dependencies import get_translator
from media_translator.api.responses import (
    bad_input_response,
    pipeline_error_response,
    preflight_response,
)
from media_translator.api.schemas import TranslateResponse
from media_translator.errors import ErrorKind, TranslationError
from media_translator.logging.logger import Log
from media_translator.translation.translator import Translator

router = APIRouter()

TRANSLATE_STATUSES = frozenset({400, 402})


@router.post("/translate", response_model=TranslateResponse)
async def translate_text(
    request: Request,
    translator: Translator = Depends(get_translator),
):
    try:
        body = await request.json()
    except ValueError:
        return bad_input_response("Request body must be valid JSON")
    if not isinstance(body, dict):
        return bad_input_response("Request body must be a JSON object")

    text = body.get("text")
    target_language = body.get("targetLanguage")
    if not isinstance(text, str) or not text.strip():
        return bad_input_response("Valid text content is required for translation")
    if not isinstance(target_language, str) or not target_language.strip():
        return bad_input_response("Target language is required")
    if len(text) > translator.max_text_length:
        return bad_input_response(
            f"Text is too long. Please limit to {translator.max_text_length:,} characters."
        )

    Log.info(f"Translation request to {target_language}", chars=len(text))
    try:
        result = await run_in_threadpool(translator.translate, text, target_language)
    except TranslationError as exc:
        Log.error(f"Translation request failed: {exc.message}", code=exc.code)
        if exc.kind is ErrorKind.VALIDATION_ERROR:
            return bad_input_response(exc.message)
        return pipeline_error_response(exc, TRANSLATE_STATUSES)

    return TranslateResponse(
        translation=result.translated_text,
        original_length=result.original_length,
        translated_length=result.translated_length,
        target_language=result.target_language,
        model=result.model,
    )


@router.options("/translate", include_in_schema=False)
def translate_preflight():
    return preflight_response()
