from abc import ABC, abstractmethod


class BaseTranslationClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_completion_tokens: int,
    ) -> str:
        """Return the model's reply as plain text.

        No sampling temperature is part of the contract; reasoning deployments
        only accept their default.
        """
