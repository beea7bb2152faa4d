from abc import ABC, abstractmethod


class BaseTranscriptionClient(ABC):
    """Contract for provider-specific speech-to-text clients."""

    @abstractmethod
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
        """Return the provider reply as received: a string or a structured object.

        ``language`` is an ISO 639-1 hint; None lets the service detect it.

        Raises:
            TranscriptionError: with a mapped ErrorKind on provider failure.
        """
