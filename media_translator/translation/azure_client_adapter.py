import httpx
import openai

from media_translator.errors import ErrorKind, TranslationError
from media_translator.logging.logger import Log
from media_translator.translation.client_base import BaseTranslationClient

_CONTENT_FILTER_CODES = frozenset({"content_filter", "content_policy_violation"})
_UNSUPPORTED_PARAMETER_CODES = frozenset({"unsupported_parameter", "unsupported_value"})
_UNSUPPORTED_PARAMETER_HINTS = ("temperature", "Unsupported value", "Unsupported parameter")


class AzureOpenAIClientAdapter(BaseTranslationClient):
    """Translation client built on an Azure OpenAI chat deployment."""

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        api_version: str,
        timeout_seconds: int,
    ) -> None:
        self._client = openai.AzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            api_version=api_version,
            timeout=timeout_seconds,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_completion_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_completion_tokens=max_completion_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranslationError(
                "Network error: unable to connect to the translation service.",
                ErrorKind.NETWORK_ERROR,
            ) from exc
        except openai.APIStatusError as exc:
            raise _map_status_error(exc) from exc
        except openai.APIError as exc:
            raise TranslationError(
                exc.message or "Translation failed due to an unexpected error.",
                ErrorKind.UNKNOWN_ERROR,
            ) from exc

        if not response.choices:
            raise TranslationError(
                "No translation received from Azure OpenAI.", ErrorKind.UNEXPECTED_RESPONSE
            )
        choice = response.choices[0]
        if choice.finish_reason == "content_filter":
            raise TranslationError(
                "Content was filtered by Azure OpenAI. Please try different text.",
                ErrorKind.CONTENT_FILTERED,
            )
        content = choice.message.content
        if not content:
            raise TranslationError(
                "No translation received from Azure OpenAI.", ErrorKind.UNEXPECTED_RESPONSE
            )
        return content


def _map_status_error(exc: openai.APIStatusError) -> TranslationError:
    status = exc.status_code
    code = str(exc.code) if exc.code is not None else ""
    message = exc.message or ""
    Log.warning(f"Translation service error: {message}", status=status, code=code)

    if status == 401 or code == "401":
        return TranslationError(
            "Invalid Azure OpenAI API key or endpoint. Please verify your credentials.",
            ErrorKind.AUTH_ERROR,
        )
    if status == 404 or code == "DeploymentNotFound":
        return TranslationError(
            "Translation model deployment not found. Please verify the deployment name.",
            ErrorKind.CONFIG_ERROR,
        )
    if code == "insufficient_quota":
        return TranslationError(
            "Azure OpenAI quota exceeded. Please check your billing.",
            ErrorKind.QUOTA_EXCEEDED,
        )
    if status == 429 or code == "rate_limit_exceeded":
        return TranslationError(
            "Rate limit exceeded. Please wait a moment and try again.",
            ErrorKind.RATE_LIMITED,
        )
    if code in _CONTENT_FILTER_CODES:
        return TranslationError(
            "Content was filtered by Azure OpenAI. Please try different text.",
            ErrorKind.CONTENT_FILTERED,
        )
    if code in _UNSUPPORTED_PARAMETER_CODES or any(
        hint in message for hint in _UNSUPPORTED_PARAMETER_HINTS
    ):
        return TranslationError(
            "Model configuration issue: the deployment rejected a request parameter.",
            ErrorKind.CONFIG_ERROR,
        )
    return TranslationError(
        message or "Translation failed. Please check your Azure OpenAI configuration.",
        ErrorKind.UNKNOWN_ERROR,
    )
