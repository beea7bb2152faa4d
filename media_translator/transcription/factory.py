from media_translator.config.settings import Settings
from media_translator.transcription.azure_client_adapter import AzureWhisperClientAdapter
from media_translator.transcription.example_client_adapter import ExampleTranscriptionClient
from media_translator.transcription.transcriber import Transcriber


class TranscriberFactory:
    """Creates the configured transcription client wrapped in a Transcriber."""

    PROVIDERS = ("azure", "example")

    @classmethod
    def create(cls, settings: Settings) -> Transcriber:
        provider = settings.transcription_provider.lower()
        if provider == "example":
            return Transcriber(client=ExampleTranscriptionClient(), model="example")
        if provider == "azure":
            client = AzureWhisperClientAdapter(
                api_key=settings.azure_whisper_api_key,
                endpoint=settings.azure_whisper_endpoint,
                api_version=settings.azure_whisper_api_version,
                timeout_seconds=settings.transcription_timeout_seconds,
            )
            return Transcriber(
                client=client,
                model=settings.azure_whisper_deployment_name or "whisper",
            )
        raise ValueError(
            f"Unknown transcription provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
