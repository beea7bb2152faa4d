from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranscriptionMetadata(CamelModel):
    filename: str
    size: int
    format: str | None = Field(None, description="File extension without the dot.")


class TranscribeResponse(CamelModel):
    success: bool = True
    transcription: str
    language: str | None = None
    duration: float | None = Field(None, description="Audio duration in seconds.")
    metadata: TranscriptionMetadata


class TranslateResponse(CamelModel):
    translation: str
    original_length: int
    translated_length: int
    target_language: str
    model: str


class StepSchema(CamelModel):
    id: str
    title: str
    description: str
    status: str


class ProcessResponse(CamelModel):
    session_id: str
    run_id: str
    kind: str
    steps: list[StepSchema]
    elapsed_seconds: float
    classification: str | None = None
    extracted_text: str | None = None
    detected_language: str | None = None
    translation: TranslateResponse | None = None
    error: str | None = None
    code: str | None = None


class SessionStateResponse(CamelModel):
    session_id: str
    run_id: str | None = None
    steps: list[StepSchema]
    output: str = Field("", description="Translated text of the latest finished run.")
    error: str | None = None
    code: str | None = None


class LanguageSchema(CamelModel):
    code: str
    name: str


class LanguagesResponse(CamelModel):
    languages: list[LanguageSchema]


class FormatsResponse(CamelModel):
    direct: list[str]
    with_transcription: list[str]
    notes: list[str]
    max_upload_bytes: int
    max_text_length: int


class ErrorResponse(CamelModel):
    error: str
    code: str
    timestamp: str
