from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from media_translator.api.app import create_app
from media_translator.api.dependencies import ServiceContainer
from media_translator.config.settings import Settings
from media_translator.extraction.factory import DocumentExtractorFactory
from media_translator.media.validator import FileValidator
from media_translator.pipeline.orchestrator import Orchestrator
from media_translator.transcription.client_base import BaseTranscriptionClient
from media_translator.transcription.example_client_adapter import ExampleTranscriptionClient
from media_translator.transcription.transcriber import Transcriber
from media_translator.translation.client_base import BaseTranslationClient
from media_translator.translation.example_client_adapter import ExampleTranslationClient
from media_translator.translation.translator import Translator


@pytest.fixture()
def example_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "example")
    monkeypatch.setenv("TRANSLATION_PROVIDER", "example")
    return Settings()


@pytest.fixture()
def client(example_settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(example_settings), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture()
def transcription_client() -> MagicMock:
    mock = MagicMock(spec=BaseTranscriptionClient)
    mock.create_transcription.side_effect = ExampleTranscriptionClient().create_transcription
    return mock


@pytest.fixture()
def translation_client() -> MagicMock:
    mock = MagicMock(spec=BaseTranslationClient)
    mock.create_chat_completion.side_effect = ExampleTranslationClient().create_chat_completion
    return mock


@pytest.fixture()
def fake_client(
    example_settings: Settings,
    transcription_client: MagicMock,
    translation_client: MagicMock,
) -> Iterator[TestClient]:
    """App wired to mock provider clients that tests can reprogram."""
    transcriber = Transcriber(client=transcription_client, model="whisper")
    translator = Translator(client=translation_client, model="o3")
    orchestrator = Orchestrator(
        validator=FileValidator(),
        extractor=DocumentExtractorFactory.create(example_settings),
        transcriber=transcriber,
        translator=translator,
    )
    services = ServiceContainer.assemble(transcriber, translator, orchestrator)
    app = create_app(example_settings, services=services)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
