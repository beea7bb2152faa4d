"""Size and type checks applied to an upload before any extraction work."""

from collections.abc import Iterable
from typing import ClassVar

from media_translator.media.formats import (
    AUDIO_EXTENSIONS,
    AUDIO_MAX_BYTES,
    DOCUMENT_EXTENSIONS,
    GLOBAL_MAX_BYTES,
    VIDEO_EXTENSIONS,
    VIDEO_MAX_BYTES,
    format_limit,
    format_megabytes,
)
from media_translator.media.models import (
    FileClassification,
    ModalityPolicy,
    UploadedFile,
    ValidationOutcome,
)

DEFAULT_POLICIES: dict[FileClassification, ModalityPolicy] = {
    FileClassification.DOCUMENT: ModalityPolicy(extensions=DOCUMENT_EXTENSIONS),
    FileClassification.AUDIO: ModalityPolicy(
        extensions=AUDIO_EXTENSIONS, max_bytes=AUDIO_MAX_BYTES
    ),
    FileClassification.VIDEO: ModalityPolicy(
        extensions=VIDEO_EXTENSIONS, max_bytes=VIDEO_MAX_BYTES
    ),
}


class FileValidator:
    """Applies per-modality policies plus a global size ceiling."""

    GENERIC_CONTENT_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"application/octet-stream", "binary/octet-stream"}
    )
    MEDIA_PREFIXES: ClassVar[tuple[str, ...]] = ("audio/", "video/")

    def __init__(
        self,
        policies: dict[FileClassification, ModalityPolicy] | None = None,
        global_max_bytes: int | None = GLOBAL_MAX_BYTES,
    ) -> None:
        self._policies = policies if policies is not None else DEFAULT_POLICIES
        self._global_max_bytes = global_max_bytes

    def validate(
        self, file: UploadedFile, classification: FileClassification
    ) -> ValidationOutcome:
        if classification is FileClassification.UNSUPPORTED:
            return ValidationOutcome.reject(self._unsupported_reason(file))

        policy = self._policies.get(classification)
        if policy is None:
            return ValidationOutcome.reject(
                f"{classification.value.capitalize()} files are not accepted."
            )

        if file.extension not in policy.extensions:
            return ValidationOutcome.reject(
                f"Unsupported {classification.value} format: .{file.extension}. "
                f"Supported formats: {_format_list(policy.extensions)}."
            )

        limit = self._effective_limit(policy)
        if limit is not None and file.size > limit:
            return ValidationOutcome.reject(
                f"File is too large ({format_megabytes(file.size)}). Maximum size "
                f"for {classification.value} files is {format_limit(limit)}."
            )

        if classification in (FileClassification.AUDIO, FileClassification.VIDEO):
            return self._check_content_type(file, classification)
        return ValidationOutcome.accept()

    def _effective_limit(self, policy: ModalityPolicy) -> int | None:
        limits = [
            limit for limit in (policy.max_bytes, self._global_max_bytes) if limit is not None
        ]
        return min(limits) if limits else None

    def _check_content_type(
        self, file: UploadedFile, classification: FileClassification
    ) -> ValidationOutcome:
        content_type = (file.content_type or "").split(";")[0].strip().lower()
        if not content_type or content_type in self.GENERIC_CONTENT_TYPES:
            return ValidationOutcome.accept()
        if content_type.startswith(self.MEDIA_PREFIXES):
            return ValidationOutcome.accept()
        return ValidationOutcome.reject(
            f"Declared content type '{content_type}' does not match "
            f"a {classification.value} file (.{file.extension})."
        )

    def _unsupported_reason(self, file: UploadedFile) -> str:
        supported = _format_list(
            ext for policy in self._policies.values() for ext in policy.extensions
        )
        if not file.extension:
            return f"File has no extension. Supported formats: {supported}."
        return f"Unsupported file format: .{file.extension}. Supported formats: {supported}."


def _format_list(extensions: Iterable[str]) -> str:
    return ", ".join(sorted(set(extensions)))


def validate(file: UploadedFile, classification: FileClassification) -> ValidationOutcome:
    """Validate with the default policies and the 25MB global ceiling."""
    return FileValidator().validate(file, classification)
