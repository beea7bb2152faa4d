from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable failure codes reported to callers."""

    VALIDATION_ERROR = "validation_error"
    AUTH_ERROR = "auth_error"
    CONFIG_ERROR = "config_error"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    CONTENT_FILTERED = "content_filtered"
    NETWORK_ERROR = "network_error"
    UNEXPECTED_RESPONSE = "unexpected_response"
    BAD_REQUEST = "bad_request"
    UNKNOWN_ERROR = "unknown_error"


class PipelineError(Exception):
    """Base exception for every classified pipeline failure.

    ``message`` is a single human-readable sentence that can be shown to the
    end user verbatim; ``kind`` is the machine-readable code.
    """

    default_kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind if kind is not None else self.default_kind

    @property
    def code(self) -> str:
        return self.kind.value


class InputValidationError(PipelineError):
    """Raised when input shape, size or type is rejected before any network call."""

    default_kind = ErrorKind.VALIDATION_ERROR


class ExtractionError(PipelineError):
    """Raised when a document yields no text or cannot be parsed."""

    default_kind = ErrorKind.VALIDATION_ERROR


class TranscriptionError(PipelineError):
    """Raised when the speech-to-text service call fails."""


class TranslationError(PipelineError):
    """Raised when the language model translation call fails."""


class ConfigurationError(PipelineError):
    """Raised when required service configuration is missing or a placeholder."""

    default_kind = ErrorKind.CONFIG_ERROR


class ProgressError(Exception):
    """Raised on an illegal processing-step transition."""
