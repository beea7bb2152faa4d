from media_translator.extraction.base import BaseTextExtractor, ExtractionOutput


class PlainTextAdapter(BaseTextExtractor):
    """Decodes bytes as UTF-8, dropping a leading byte order mark.

    Undecodable bytes become U+FFFD.
    """

    def extract(self, content: bytes, extension: str = "") -> ExtractionOutput:
        text = content.decode("utf-8-sig", errors="replace")
        warnings: list[str] = []
        if "�" in text and extension not in ("", "txt"):
            warnings.append(
                f".{extension} content decoded as UTF-8 text contains replacement characters"
            )
        return ExtractionOutput(text=text, warnings=warnings)
