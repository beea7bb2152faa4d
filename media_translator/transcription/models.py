from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptionSegment:
    """A timed span of recognized speech."""

    start: float
    end: float
    text: str


@dataclass(frozen=True)
class TranscriptionResult:
    """Complete speech-to-text output for one audio or video file."""

    text: str
    language: str | None = None
    duration: float | None = None
    segments: tuple[TranscriptionSegment, ...] | None = None
