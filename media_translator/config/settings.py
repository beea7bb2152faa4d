from pydantic_settings import BaseSettings, SettingsConfigDict

from media_translator.errors import ConfigurationError

_PLACEHOLDER_MARKERS = ("your-azure-api-key", "your-actual-azure", "your-")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    pdf_engine: str = "pdfplumber"

    transcription_provider: str = "azure"
    translation_provider: str = "azure"

    azure_whisper_api_key: str = ""
    azure_whisper_endpoint: str = ""
    azure_whisper_deployment_name: str = ""
    azure_whisper_api_version: str = "2024-06-01"
    transcription_timeout_seconds: int = 300

    azure_openai_api_key: str = ""
    azure_openai_endpoint: str = ""
    azure_openai_deployment_name: str = ""
    azure_openai_api_version: str = ""
    translation_timeout_seconds: int = 300
    translation_max_completion_tokens: int = 100000

    def ensure_configured(self) -> None:
        """Fail fast when an Azure provider is selected without real credentials.

        Raises:
            ConfigurationError: listing every missing or placeholder variable.
        """
        required: dict[str, str] = {}
        if self.transcription_provider.lower() == "azure":
            required.update(
                {
                    "AZURE_WHISPER_API_KEY": self.azure_whisper_api_key,
                    "AZURE_WHISPER_ENDPOINT": self.azure_whisper_endpoint,
                    "AZURE_WHISPER_DEPLOYMENT_NAME": self.azure_whisper_deployment_name,
                    "AZURE_WHISPER_API_VERSION": self.azure_whisper_api_version,
                }
            )
        if self.translation_provider.lower() == "azure":
            required.update(
                {
                    "AZURE_OPENAI_API_KEY": self.azure_openai_api_key,
                    "AZURE_OPENAI_ENDPOINT": self.azure_openai_endpoint,
                    "AZURE_OPENAI_DEPLOYMENT_NAME": self.azure_openai_deployment_name,
                    "AZURE_OPENAI_API_VERSION": self.azure_openai_api_version,
                }
            )

        invalid = [name for name, value in required.items() if _is_unset(value)]
        if invalid:
            raise ConfigurationError(
                f"Missing or invalid {', '.join(invalid)}. "
                "Set the actual Azure OpenAI credentials in the environment or .env file."
            )


def _is_unset(value: str) -> bool:
    cleaned = value.strip().lower()
    if not cleaned:
        return True
    return any(marker in cleaned for marker in _PLACEHOLDER_MARKERS)
