from media_translator.config.settings import Settings
from media_translator.translation.azure_client_adapter import AzureOpenAIClientAdapter
from media_translator.translation.example_client_adapter import ExampleTranslationClient
from media_translator.translation.translator import Translator


class TranslatorFactory:
    """Creates the configured translation client wrapped in a Translator."""

    PROVIDERS = ("azure", "example")

    @classmethod
    def create(cls, settings: Settings) -> Translator:
        provider = settings.translation_provider.lower()
        if provider == "example":
            return Translator(client=ExampleTranslationClient(), model="example")
        if provider == "azure":
            client = AzureOpenAIClientAdapter(
                api_key=settings.azure_openai_api_key,
                endpoint=settings.azure_openai_endpoint,
                api_version=settings.azure_openai_api_version,
                timeout_seconds=settings.translation_timeout_seconds,
            )
            return Translator(
                client=client,
                model=settings.azure_openai_deployment_name or "o3",
                max_completion_tokens=settings.translation_max_completion_tokens,
            )
        raise ValueError(
            f"Unknown translation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
