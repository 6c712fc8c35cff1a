from pathlib import Path

from resume_intake.enhancement.exceptions import EnhancementError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the enhancement prompt template.

    Args:
        path: Template file with a ``{raw_text}`` placeholder.
              Defaults to the bundled enhancement_prompt.txt.

    Raises:
        EnhancementError: if the file cannot be read or lacks the placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "enhancement_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EnhancementError(f"Failed to load prompt template: {exc}") from exc
    if "{raw_text}" not in template:
        raise EnhancementError(f"Prompt template {path.name} has no {{raw_text}} placeholder")
    return template
