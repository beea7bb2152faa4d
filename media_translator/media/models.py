from dataclasses import dataclass
from enum import Enum


class FileClassification(str, Enum):
    """Coarse modality that decides which extraction path a file takes."""

    DOCUMENT = "document"
    AUDIO = "audio"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"


def file_extension(name: str) -> str:
    """Lower-cased text after the last dot, or an empty string."""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


@dataclass(frozen=True)
class UploadedFile:
    """A single user upload, consumed once by the pipeline."""

    content: bytes
    name: str
    size: int
    content_type: str | None = None

    @classmethod
    def from_bytes(
        cls, content: bytes, name: str, content_type: str | None = None
    ) -> "UploadedFile":
        return cls(content=content, name=name, size=len(content), content_type=content_type)

    @property
    def extension(self) -> str:
        return file_extension(self.name)


@dataclass(frozen=True)
class ValidationOutcome:
    """Accept/reject decision with a reason suitable for the end user."""

    accepted: bool
    reason: str | None = None

    @classmethod
    def accept(cls) -> "ValidationOutcome":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: str) -> "ValidationOutcome":
        return cls(accepted=False, reason=reason)


@dataclass(frozen=True)
class ModalityPolicy:
    """Allowed extensions and optional size ceiling for one modality."""

    extensions: frozenset[str]
    max_bytes: int | None = None
