from unittest.mock import MagicMock

import pytest

from media_translator.config.settings import Settings
from media_translator.errors import ErrorKind, TranscriptionError
from media_translator.media.formats import MEGABYTE
from media_translator.media.models import UploadedFile
from media_translator.transcription.client_base import BaseTranscriptionClient
from media_translator.transcription.example_client_adapter import ExampleTranscriptionClient
from media_translator.transcription.factory import TranscriberFactory
from media_translator.transcription.transcriber import Transcriber


def _make_transcriber(reply: object = "hello") -> tuple[Transcriber, MagicMock]:
    client = MagicMock(spec=BaseTranscriptionClient)
    client.create_transcription.return_value = reply
    return Transcriber(client=client, model="whisper-dep"), client


class TestTranscriberPreconditions:
    def test_missing_file(self) -> None:
        transcriber, client = _make_transcriber()
        with pytest.raises(TranscriptionError, match="No audio file provided") as exc_info:
            transcriber.transcribe(None)
        assert exc_info.value.kind is ErrorKind.VALIDATION_ERROR
        client.create_transcription.assert_not_called()

    def test_empty_file(self) -> None:
        transcriber, client = _make_transcriber()
        with pytest.raises(TranscriptionError, match="empty"):
            transcriber.transcribe(UploadedFile.from_bytes(b"", "a.mp3"))
        client.create_transcription.assert_not_called()

    def test_oversized_file(self) -> None:
        transcriber, client = _make_transcriber()
        big = UploadedFile(content=b"x", name="a.wav", size=30 * MEGABYTE)
        with pytest.raises(TranscriptionError, match="exceeds maximum limit of 25MB"):
            transcriber.transcribe(big)
        client.create_transcription.assert_not_called()

    def test_declared_size_over_limit(self) -> None:
        transcriber, _ = _make_transcriber()
        with pytest.raises(TranscriptionError, match="exceeds maximum limit of 25MB"):
            transcriber.check_size(25 * MEGABYTE + 1)
        transcriber.check_size(25 * MEGABYTE)

    def test_unsupported_type(self) -> None:
        transcriber, client = _make_transcriber()
        with pytest.raises(TranscriptionError, match="Unsupported file type") as exc_info:
            transcriber.transcribe(UploadedFile.from_bytes(b"x", "a.txt", "text/plain"))
        assert exc_info.value.kind is ErrorKind.VALIDATION_ERROR
        client.create_transcription.assert_not_called()

    def test_known_content_type_allows_odd_extension(self) -> None:
        transcriber, client = _make_transcriber()
        transcriber.transcribe(UploadedFile.from_bytes(b"x", "voice.bin", "audio/mpeg"))
        client.create_transcription.assert_called_once()

    def test_service_only_extension_accepted(self) -> None:
        transcriber, client = _make_transcriber()
        transcriber.transcribe(UploadedFile.from_bytes(b"x", "voice.mpga"))
        client.create_transcription.assert_called_once()


class TestTranscriberRequest:
    def test_sends_verbose_json_at_zero_temperature(self, small_wav: UploadedFile) -> None:
        transcriber, client = _make_transcriber()
        transcriber.transcribe(small_wav)
        client.create_transcription.assert_called_once_with(
            model="whisper-dep",
            file_name="speech.wav",
            content=small_wav.content,
            content_type="audio/wav",
            response_format="verbose_json",
            temperature=0.0,
            language=None,
        )

    def test_language_hint_is_forwarded(self, small_wav: UploadedFile) -> None:
        transcriber, client = _make_transcriber()
        transcriber.transcribe(small_wav, language=" FR ")
        assert client.create_transcription.call_args.kwargs["language"] == "fr"

    def test_unknown_language_hint_rejected(self, small_wav: UploadedFile) -> None:
        transcriber, client = _make_transcriber()
        with pytest.raises(
            TranscriptionError, match="Unsupported transcription language"
        ) as exc_info:
            transcriber.transcribe(small_wav, language="klingon")
        assert exc_info.value.kind is ErrorKind.VALIDATION_ERROR
        client.create_transcription.assert_not_called()

    def test_plain_reply(self, small_wav: UploadedFile) -> None:
        transcriber, _ = _make_transcriber("just text")
        result = transcriber.transcribe(small_wav)
        assert result.text == "just text"
        assert result.language is None
        assert result.duration is None

    def test_verbose_reply(self, small_wav: UploadedFile) -> None:
        transcriber, _ = _make_transcriber(
            {"text": "bonjour", "language": "french", "duration": 1.25, "segments": []}
        )
        result = transcriber.transcribe(small_wav)
        assert result.text == "bonjour"
        assert result.language == "french"
        assert result.duration == 1.25
        assert result.segments == ()

    def test_client_errors_propagate(self, small_wav: UploadedFile) -> None:
        transcriber, client = _make_transcriber()
        client.create_transcription.side_effect = TranscriptionError(
            "Too many requests.", ErrorKind.RATE_LIMITED
        )
        with pytest.raises(TranscriptionError) as exc_info:
            transcriber.transcribe(small_wav)
        assert exc_info.value.kind is ErrorKind.RATE_LIMITED

    def test_unexpected_reply(self, small_wav: UploadedFile) -> None:
        transcriber, _ = _make_transcriber(12345)
        with pytest.raises(TranscriptionError) as exc_info:
            transcriber.transcribe(small_wav)
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_RESPONSE


class TestExampleTranscriptionClient:
    def test_returns_verbose_reply(self, small_wav: UploadedFile) -> None:
        transcriber = Transcriber(client=ExampleTranscriptionClient(), model="example")
        result = transcriber.transcribe(small_wav)
        assert result.text == "This is an example transcription."
        assert result.language == "english"
        assert result.duration == 2.5
        assert result.segments is not None and len(result.segments) == 1


class TestTranscriberFactory:
    def test_example_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "example")
        transcriber = TranscriberFactory.create(Settings())
        assert transcriber.model == "example"

    def test_azure_provider_uses_deployment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "azure")
        monkeypatch.setenv("AZURE_WHISPER_DEPLOYMENT_NAME", "whisper-prod")
        monkeypatch.setenv("AZURE_WHISPER_API_KEY", "k")
        monkeypatch.setenv("AZURE_WHISPER_ENDPOINT", "https://example.openai.azure.com")
        transcriber = TranscriberFactory.create(Settings())
        assert transcriber.model == "whisper-prod"

    def test_unknown_provider_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "local")
        with pytest.raises(ValueError, match="Unknown transcription provider"):
            TranscriberFactory.create(Settings())
