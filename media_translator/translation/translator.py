"""LLM-backed text translator."""

from pathlib import Path

from media_translator.errors import ErrorKind, TranslationError
from media_translator.logging.logger import Log
from media_translator.media.formats import MAX_TEXT_LENGTH
from media_translator.translation.client_base import BaseTranslationClient
from media_translator.translation.models import TranslationResult
from media_translator.translation.prompt_loader import load_prompt_template


class Translator:
    """Translates text into a named target language with a chat model.

    Holds no per-call state: repeated calls with the same input are
    independent requests.
    """

    def __init__(
        self,
        *,
        client: BaseTranslationClient,
        model: str,
        max_completion_tokens: int = 100000,
        max_text_length: int = MAX_TEXT_LENGTH,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_completion_tokens = max_completion_tokens
        self._max_text_length = max_text_length
        self._system_template = load_prompt_template("system_prompt.txt", prompt_dir)
        self._user_template = load_prompt_template("user_prompt.txt", prompt_dir)

    @property
    def model(self) -> str:
        return self._model

    @property
    def max_text_length(self) -> int:
        return self._max_text_length

    def translate(self, text: str, target_language: str) -> TranslationResult:
        """Translate ``text`` into ``target_language``.

        Raises:
            TranslationError: kind ``validation_error`` for bad input,
                otherwise the mapped provider kind.
        """
        original_length = len(text)
        self._check_preconditions(text, target_language)
        language = target_language.strip()

        Log.info(
            f"Starting translation to {language}",
            chars=original_length,
            model=self._model,
        )
        Log.debug(f"Translation source preview: {text[:100]}")

        reply = self._client.create_chat_completion(
            model=self._model,
            system_prompt=self._system_template.format(target_language=language),
            user_prompt=self._user_template.format(target_language=language, text=text),
            max_completion_tokens=self._max_completion_tokens,
        )
        translated = reply.strip()
        if not translated:
            raise TranslationError(
                "No translation received from the translation service.",
                ErrorKind.UNEXPECTED_RESPONSE,
            )

        Log.info(f"Translation to {language} completed: {len(translated)} chars")
        return TranslationResult(
            translated_text=translated,
            original_length=original_length,
            translated_length=len(translated),
            target_language=language,
            model=self._model,
        )

    def _check_preconditions(self, text: str, target_language: str) -> None:
        if not text or not text.strip():
            raise TranslationError(
                "Text to translate cannot be empty.", ErrorKind.VALIDATION_ERROR
            )
        if not target_language or not target_language.strip():
            raise TranslationError(
                "Target language must be specified.", ErrorKind.VALIDATION_ERROR
            )
        if len(text) > self._max_text_length:
            raise TranslationError(
                f"Text is too long ({len(text):,} characters). "
                f"Please limit to {self._max_text_length:,} characters.",
                ErrorKind.VALIDATION_ERROR,
            )
