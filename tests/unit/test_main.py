import pytest
from fastapi import FastAPI

from media_translator.config.settings import Settings
from media_translator.errors import ConfigurationError
from media_translator.main import build_app, main


class TestBuildApp:
    def test_example_providers_build_app(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "example")
        monkeypatch.setenv("TRANSLATION_PROVIDER", "example")
        app = build_app(Settings())
        assert isinstance(app, FastAPI)
        assert app.state.services.translator.model == "example"

    def test_placeholder_credentials_fail_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "example")
        monkeypatch.setenv("TRANSLATION_PROVIDER", "azure")
        monkeypatch.setenv("AZURE_OPENAI_API_KEY", "your-azure-api-key")
        with pytest.raises(ConfigurationError):
            build_app(Settings())

    def test_main_exits_on_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "azure")
        monkeypatch.setenv("AZURE_WHISPER_API_KEY", "")
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
