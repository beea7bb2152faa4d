"""Extension sets and size ceilings shared by the classifier, validator and clients."""

from dataclasses import dataclass

MEGABYTE = 1024 * 1024

DOCUMENT_EXTENSIONS: frozenset[str] = frozenset({"txt", "doc", "docx", "pdf"})
AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    {"mp3", "wav", "m4a", "aac", "ogg", "flac", "wma", "webm"}
)
VIDEO_EXTENSIONS: frozenset[str] = frozenset(
    {"mp4", "mov", "avi", "mkv", "webm", "m4v", "wmv", "flv"}
)

AUDIO_MAX_BYTES = 25 * MEGABYTE
VIDEO_MAX_BYTES = 25 * MEGABYTE
GLOBAL_MAX_BYTES = 25 * MEGABYTE

# The speech-to-text service accepts a few container names the UI never offers.
TRANSCRIPTION_EXTENSIONS: frozenset[str] = (
    AUDIO_EXTENSIONS | VIDEO_EXTENSIONS | frozenset({"mp4", "mpeg", "mpga"})
)
TRANSCRIPTION_CONTENT_TYPES: frozenset[str] = frozenset(
    {
        "audio/mpeg",
        "audio/mp3",
        "audio/mpga",
        "audio/wav",
        "audio/x-wav",
        "audio/m4a",
        "audio/x-m4a",
        "audio/mp4",
        "audio/aac",
        "audio/ogg",
        "audio/flac",
        "audio/wma",
        "audio/webm",
        "video/mp4",
        "video/mpeg",
        "video/mov",
        "video/quicktime",
        "video/avi",
        "video/mkv",
        "video/webm",
        "video/m4v",
        "video/wmv",
        "video/flv",
    }
)
TRANSCRIPTION_MAX_BYTES = 25 * MEGABYTE

MAX_TEXT_LENGTH = 50_000


def format_megabytes(size_bytes: int) -> str:
    return f"{size_bytes / MEGABYTE:.2f}MB"


def format_limit(limit_bytes: int) -> str:
    megabytes = limit_bytes / MEGABYTE
    if megabytes.is_integer():
        return f"{int(megabytes)}MB"
    return f"{megabytes:.2f}MB"


@dataclass(frozen=True)
class SupportedFormats:
    """Extensions grouped by how the pipeline turns them into text."""

    direct: tuple[str, ...]
    with_transcription: tuple[str, ...]
    notes: tuple[str, ...]


def supported_formats() -> SupportedFormats:
    return SupportedFormats(
        direct=tuple(sorted(DOCUMENT_EXTENSIONS)),
        with_transcription=tuple(sorted(AUDIO_EXTENSIONS | VIDEO_EXTENSIONS)),
        notes=(
            "Text and document files are translated directly.",
            "Audio and video files are transcribed first.",
            f"Uploads are limited to {format_limit(GLOBAL_MAX_BYTES)}; pasted text to "
            f"{MAX_TEXT_LENGTH:,} characters.",
        ),
    )
