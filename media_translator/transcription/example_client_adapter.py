"""Example transcription client adapter.

Returns a fixed verbose reply without network calls. Useful for local
development and as a template for new provider adapters.
"""

from typing import ClassVar

from media_translator.transcription.client_base import BaseTranscriptionClient


class ExampleTranscriptionClient(BaseTranscriptionClient):
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "text": "This is an example transcription.",
        "language": "english",
        "duration": 2.5,
        "segments": [
            {"start": 0.0, "end": 2.5, "text": "This is an example transcription."}
        ],
    }

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
        _ = model, file_name, content, content_type, response_format, temperature, language
        return dict(self.DEFAULT_RESPONSE)
