from pathlib import Path

from media_translator.errors import ErrorKind, TranslationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a translation prompt template by file name.

    Args:
        name: Template file name, e.g. ``system_prompt.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled prompts directory.

    Returns:
        The raw template string with ``{target_language}``/``{text}`` placeholders.

    Raises:
        TranslationError: kind ``config_error`` if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranslationError(
            f"Failed to load prompt template: {exc}", ErrorKind.CONFIG_ERROR
        ) from exc
