"""Read-only listings the dashboard uses to build its pickers."""

from fastapi import APIRouter

from media_translator.api.schemas import FormatsResponse, LanguageSchema, LanguagesResponse
from media_translator.media.formats import GLOBAL_MAX_BYTES, MAX_TEXT_LENGTH, supported_formats
from media_translator.transcription.languages import SUPPORTED_LANGUAGES

router = APIRouter()


@router.get("/languages", response_model=LanguagesResponse)
def list_languages():
    return LanguagesResponse(
        languages=[
            LanguageSchema(code=language.code, name=language.name)
            for language in SUPPORTED_LANGUAGES
        ]
    )


@router.get("/formats", response_model=FormatsResponse)
def list_formats():
    formats = supported_formats()
    return FormatsResponse(
        direct=list(formats.direct),
        with_transcription=list(formats.with_transcription),
        notes=list(formats.notes),
        max_upload_bytes=GLOBAL_MAX_BYTES,
        max_text_length=MAX_TEXT_LENGTH,
    )
