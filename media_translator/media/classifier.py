from media_translator.media.formats import (
    AUDIO_EXTENSIONS,
    DOCUMENT_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from media_translator.media.models import FileClassification, file_extension

# Lookup order matters: "webm" is both an audio and a video container.
_CLASSIFICATION_ORDER: tuple[tuple[FileClassification, frozenset[str]], ...] = (
    (FileClassification.DOCUMENT, DOCUMENT_EXTENSIONS),
    (FileClassification.AUDIO, AUDIO_EXTENSIONS),
    (FileClassification.VIDEO, VIDEO_EXTENSIONS),
)


def classify(name: str, content_type: str | None = None) -> FileClassification:
    """Classify a file by its extension.

    Args:
        name: File name; only its extension is consulted.
        content_type: Declared MIME type. Advisory only, it never changes the
            outcome. The validator uses it as a secondary check for audio and
            video.
    """
    extension = file_extension(name)
    if not extension:
        return FileClassification.UNSUPPORTED
    for classification, extensions in _CLASSIFICATION_ORDER:
        if extension in extensions:
            return classification
    return FileClassification.UNSUPPORTED
