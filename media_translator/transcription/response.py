"""Decodes the transcription service's reply into a tagged union, once.

The service answers with either a bare string (``text`` response formats) or
a structured object (``json``/``verbose_json``). Callers only ever see
``PlainTranscript`` or ``VerboseTranscript``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from media_translator.errors import ErrorKind, TranscriptionError
from media_translator.transcription.models import TranscriptionSegment


@dataclass(frozen=True)
class PlainTranscript:
    text: str


@dataclass(frozen=True)
class VerboseTranscript:
    text: str
    language: str | None = None
    duration: float | None = None
    segments: tuple[TranscriptionSegment, ...] | None = None


TranscriptResponse = PlainTranscript | VerboseTranscript


def decode_response(raw: object) -> TranscriptResponse:
    """Detect the reply shape and decode it.

    Raises:
        TranscriptionError: kind ``unexpected_response`` for any other shape.
    """
    if isinstance(raw, str):
        return PlainTranscript(text=raw)

    payload = _as_mapping(raw)
    if payload is None or not isinstance(payload.get("text"), str):
        raise _unexpected(f"reply of type {type(raw).__name__} has no text")

    return VerboseTranscript(
        text=payload["text"],
        language=_optional_str(payload.get("language")),
        duration=_optional_float(payload.get("duration"), "duration"),
        segments=_segments(payload.get("segments")),
    )


def _as_mapping(raw: object) -> Mapping[str, Any] | None:
    if isinstance(raw, Mapping):
        return raw
    model_dump = getattr(raw, "model_dump", None)
    if callable(model_dump):
        dumped = model_dump()
        if isinstance(dumped, Mapping):
            return dumped
    return None


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _optional_float(value: Any, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _unexpected(f"'{field}' must be a number")
    return float(value)


def _segments(raw: Any) -> tuple[TranscriptionSegment, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise _unexpected("'segments' must be a list")
    segments = []
    for index, item in enumerate(raw):
        segment = _as_mapping(item)
        if segment is None or not isinstance(segment.get("text"), str):
            raise _unexpected(f"segment {index} has no text")
        segments.append(
            TranscriptionSegment(
                start=_optional_float(segment.get("start"), "start") or 0.0,
                end=_optional_float(segment.get("end"), "end") or 0.0,
                text=segment["text"],
            )
        )
    return tuple(segments)


def _unexpected(detail: str) -> TranscriptionError:
    return TranscriptionError(
        f"Unexpected response format from the transcription service: {detail}.",
        ErrorKind.UNEXPECTED_RESPONSE,
    )
