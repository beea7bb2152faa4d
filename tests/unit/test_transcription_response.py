from unittest.mock import MagicMock

import pytest

from media_translator.errors import ErrorKind, TranscriptionError
from media_translator.transcription.models import TranscriptionSegment
from media_translator.transcription.response import (
    PlainTranscript,
    VerboseTranscript,
    decode_response,
)


class TestDecodeResponse:
    def test_plain_string(self) -> None:
        assert decode_response("hello there") == PlainTranscript(text="hello there")

    def test_verbose_mapping(self) -> None:
        response = decode_response(
            {
                "text": "hola",
                "language": "spanish",
                "duration": 3,
                "segments": [{"start": 0, "end": 1.5, "text": "hola"}],
            }
        )
        assert response == VerboseTranscript(
            text="hola",
            language="spanish",
            duration=3.0,
            segments=(TranscriptionSegment(start=0.0, end=1.5, text="hola"),),
        )

    def test_sdk_model_is_dumped(self) -> None:
        raw = MagicMock()
        raw.model_dump.return_value = {"text": "from sdk", "language": "english"}
        response = decode_response(raw)
        assert isinstance(response, VerboseTranscript)
        assert response.text == "from sdk"
        assert response.duration is None
        assert response.segments is None

    def test_empty_text_is_still_a_transcript(self) -> None:
        response = decode_response({"text": ""})
        assert response == VerboseTranscript(text="")

    def test_missing_segment_times_default_to_zero(self) -> None:
        response = decode_response({"text": "a", "segments": [{"text": "a"}]})
        assert isinstance(response, VerboseTranscript)
        assert response.segments == (TranscriptionSegment(start=0.0, end=0.0, text="a"),)

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            42,
            {"language": "english"},
            {"text": 5},
            {"text": "a", "duration": "long"},
            {"text": "a", "segments": "nope"},
            {"text": "a", "segments": [{"start": 0}]},
        ],
    )
    def test_unexpected_shapes_raise(self, raw: object) -> None:
        with pytest.raises(TranscriptionError) as exc_info:
            decode_response(raw)
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_RESPONSE
