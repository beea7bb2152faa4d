"""Languages the speech-to-text service accepts as a hint, keyed by ISO 639-1 code."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    code: str
    name: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = tuple(
    Language(code, name)
    for code, name in (
        ("af", "Afrikaans"),
        ("ar", "Arabic"),
        ("hy", "Armenian"),
        ("az", "Azerbaijani"),
        ("be", "Belarusian"),
        ("bs", "Bosnian"),
        ("bg", "Bulgarian"),
        ("ca", "Catalan"),
        ("zh", "Chinese"),
        ("hr", "Croatian"),
        ("cs", "Czech"),
        ("da", "Danish"),
        ("nl", "Dutch"),
        ("en", "English"),
        ("et", "Estonian"),
        ("fi", "Finnish"),
        ("fr", "French"),
        ("gl", "Galician"),
        ("de", "German"),
        ("el", "Greek"),
        ("he", "Hebrew"),
        ("hi", "Hindi"),
        ("hu", "Hungarian"),
        ("is", "Icelandic"),
        ("id", "Indonesian"),
        ("it", "Italian"),
        ("ja", "Japanese"),
        ("kn", "Kannada"),
        ("kk", "Kazakh"),
        ("ko", "Korean"),
        ("lv", "Latvian"),
        ("lt", "Lithuanian"),
        ("mk", "Macedonian"),
        ("ms", "Malay"),
        ("mr", "Marathi"),
        ("mi", "Maori"),
        ("ne", "Nepali"),
        ("no", "Norwegian"),
        ("fa", "Persian"),
        ("pl", "Polish"),
        ("pt", "Portuguese"),
        ("ro", "Romanian"),
        ("ru", "Russian"),
        ("sr", "Serbian"),
        ("sk", "Slovak"),
        ("sl", "Slovenian"),
        ("es", "Spanish"),
        ("sw", "Swahili"),
        ("sv", "Swedish"),
        ("tl", "Tagalog"),
        ("ta", "Tamil"),
        ("th", "Thai"),
        ("tr", "Turkish"),
        ("uk", "Ukrainian"),
        ("ur", "Urdu"),
        ("vi", "Vietnamese"),
        ("cy", "Welsh"),
    )
)

_BY_CODE: dict[str, Language] = {language.code: language for language in SUPPORTED_LANGUAGES}


def normalize_language_code(code: str | None) -> str | None:
    """Lower-cased, trimmed code, or None when no hint was given."""
    if code is None:
        return None
    code = code.strip().lower()
    return code or None


def find_language(code: str | None) -> Language | None:
    normalized = normalize_language_code(code)
    if normalized is None:
        return None
    return _BY_CODE.get(normalized)


def language_name(code: str) -> str:
    """Display name for ``code``; unknown codes are returned unchanged."""
    language = find_language(code)
    return language.name if language is not None else code
