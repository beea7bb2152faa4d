from pathlib import Path
from unittest.mock import MagicMock

import pytest

from media_translator.config.settings import Settings
from media_translator.errors import ErrorKind, TranslationError
from media_translator.translation.client_base import BaseTranslationClient
from media_translator.translation.example_client_adapter import ExampleTranslationClient
from media_translator.translation.factory import TranslatorFactory
from media_translator.translation.prompt_loader import load_prompt_template
from media_translator.translation.translator import Translator


def _make_translator(reply: str = "Hola mundo") -> tuple[Translator, MagicMock]:
    client = MagicMock(spec=BaseTranslationClient)
    client.create_chat_completion.return_value = reply
    return Translator(client=client, model="o3", max_completion_tokens=500), client


class TestTranslatorPreconditions:
    @pytest.mark.parametrize("text", ["", "   \n\t"])
    def test_empty_text(self, text: str) -> None:
        translator, client = _make_translator()
        with pytest.raises(TranslationError, match="cannot be empty") as exc_info:
            translator.translate(text, "Spanish")
        assert exc_info.value.kind is ErrorKind.VALIDATION_ERROR
        client.create_chat_completion.assert_not_called()

    def test_missing_language(self) -> None:
        translator, client = _make_translator()
        with pytest.raises(TranslationError, match="Target language"):
            translator.translate("hello", "  ")
        client.create_chat_completion.assert_not_called()

    def test_exactly_max_length_is_sent(self) -> None:
        translator, client = _make_translator()
        translator.translate("a" * 50_000, "German")
        client.create_chat_completion.assert_called_once()

    def test_one_over_max_length_is_rejected(self) -> None:
        translator, client = _make_translator()
        with pytest.raises(TranslationError, match="50,000 characters") as exc_info:
            translator.translate("a" * 50_001, "German")
        assert exc_info.value.kind is ErrorKind.VALIDATION_ERROR
        client.create_chat_completion.assert_not_called()


class TestTranslatorTranslate:
    def test_result_fields(self) -> None:
        translator, _ = _make_translator("  Hola mundo \n")
        result = translator.translate("Hello world", " Spanish ")
        assert result.translated_text == "Hola mundo"
        assert result.original_length == 11
        assert result.translated_length == 10
        assert result.target_language == "Spanish"
        assert result.model == "o3"

    def test_original_length_counts_untrimmed_text(self) -> None:
        translator, _ = _make_translator()
        result = translator.translate("  Hello  ", "Spanish")
        assert result.original_length == 9

    def test_prompts_name_language_and_text(self) -> None:
        translator, client = _make_translator()
        translator.translate("Good morning", "Japanese")
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "o3"
        assert kwargs["max_completion_tokens"] == 500
        assert "translate text to Japanese" in kwargs["system_prompt"]
        assert "ONLY the translated text" in kwargs["system_prompt"]
        assert kwargs["user_prompt"].startswith("Translate this text to Japanese:")
        assert "Good morning" in kwargs["user_prompt"]

    def test_text_with_braces_is_sent_verbatim(self) -> None:
        translator, client = _make_translator()
        translator.translate("value = {x}", "French")
        assert "value = {x}" in client.create_chat_completion.call_args.kwargs["user_prompt"]

    def test_blank_reply_is_unexpected(self) -> None:
        translator, _ = _make_translator("   ")
        with pytest.raises(TranslationError) as exc_info:
            translator.translate("hello", "Spanish")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_RESPONSE

    def test_calls_are_independent(self) -> None:
        translator, client = _make_translator()
        first = translator.translate("hello", "Spanish")
        second = translator.translate("hello", "Spanish")
        assert first == second
        assert client.create_chat_completion.call_count == 2


class TestExampleTranslationClient:
    def test_tags_text_with_language(self) -> None:
        translator = Translator(client=ExampleTranslationClient(), model="example")
        result = translator.translate("Hello world", "Spanish")
        assert result.translated_text == "[Spanish] Hello world"


class TestPromptLoader:
    def test_loads_bundled_template(self) -> None:
        template = load_prompt_template("user_prompt.txt")
        assert "{target_language}" in template
        assert "{text}" in template

    def test_custom_directory(self, tmp_path: Path) -> None:
        (tmp_path / "system_prompt.txt").write_text("S {target_language}", encoding="utf-8")
        (tmp_path / "user_prompt.txt").write_text("U {text}", encoding="utf-8")
        client = MagicMock(spec=BaseTranslationClient)
        client.create_chat_completion.return_value = "ok"
        Translator(client=client, model="m", prompt_dir=tmp_path).translate("hi", "Polish")
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["system_prompt"] == "S Polish"
        assert kwargs["user_prompt"] == "U hi"

    def test_missing_template_is_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(TranslationError, match="Failed to load prompt") as exc_info:
            load_prompt_template("absent.txt", tmp_path)
        assert exc_info.value.kind is ErrorKind.CONFIG_ERROR


class TestTranslatorFactory:
    def test_example_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSLATION_PROVIDER", "example")
        assert TranslatorFactory.create(Settings()).model == "example"

    def test_azure_defaults_model_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSLATION_PROVIDER", "azure")
        monkeypatch.setenv("AZURE_OPENAI_API_KEY", "k")
        monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://example.openai.azure.com")
        monkeypatch.setenv("AZURE_OPENAI_API_VERSION", "2025-01-01-preview")
        monkeypatch.delenv("AZURE_OPENAI_DEPLOYMENT_NAME", raising=False)
        assert TranslatorFactory.create(Settings()).model == "o3"

    def test_unknown_provider_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSLATION_PROVIDER", "deepl")
        with pytest.raises(ValueError, match="Unknown translation provider"):
            TranslatorFactory.create(Settings())
