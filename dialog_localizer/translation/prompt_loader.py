from pathlib import Path

from dialog_localizer.translation.exceptions import TranslationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt_template(path: Path | None = None) -> str:
    """Load the translation system prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled system_prompt.txt.

    Returns:
        The raw template with {target_language}, {source_key} and
        {target_key} placeholders.

    Raises:
        TranslationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranslationError(f"Failed to load prompt template: {exc}") from exc
