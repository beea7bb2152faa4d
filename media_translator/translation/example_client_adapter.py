"""Example translation client adapter.

Echoes the source text back with a language tag. No network calls; useful
for local development and as a template for new provider adapters.
"""

from media_translator.translation.client_base import BaseTranslationClient


class ExampleTranslationClient(BaseTranslationClient):
    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_completion_tokens: int,
    ) -> str:
        _ = model, system_prompt, max_completion_tokens
        header, _, body = user_prompt.partition("\n\n")
        language = header.removeprefix("Translate this text to ").rstrip(":")
        return f"[{language}] {body}"
