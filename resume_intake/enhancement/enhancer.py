"""AI-powered cleanup of noisy resume text."""

from pathlib import Path

from resume_intake.enhancement.base import BaseEnhancer
from resume_intake.enhancement.client_base import BaseEnhancementClient
from resume_intake.enhancement.exceptions import EnhancementError, EnhancementRejectedError
from resume_intake.enhancement.prompt_loader import load_prompt_template
from resume_intake.logging.logger import Log


class Enhancer(BaseEnhancer):
    """Sends extracted text to a language model and keeps the answer only if plausible.

    The completion is accepted when it is non-empty and at least
    ``min_length_ratio`` times the length of the input. Anything else
    (transport error, timeout, bad status, empty or short answer) returns the
    input unchanged.
    """

    def __init__(
        self,
        *,
        client: BaseEnhancementClient,
        model: str,
        temperature: float = 0.1,
        min_length_ratio: float = 0.5,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._min_length_ratio = min_length_ratio
        self._prompt_template = load_prompt_template(prompt_template_path)

    def enhance(self, raw_text: str) -> str:
        if not raw_text or not raw_text.strip():
            return raw_text
        prompt = self._prompt_template.replace("{raw_text}", raw_text)
        Log.debug(f"Enhancement prompt:\n{prompt}")

        try:
            completion = self._client.complete(
                model=self._model,
                temperature=self._temperature,
                prompt=prompt,
            )
            Log.debug(f"AI raw response:\n{completion}")
            improved = self._accept(raw_text, completion)
        except EnhancementError as exc:
            Log.warning(f"Enhancement skipped, keeping original text: {exc}")
            return raw_text
        except Exception as exc:
            Log.error(f"Unexpected enhancement failure, keeping original text: {exc}")
            return raw_text

        Log.info(
            "Enhancement accepted",
            input_chars=len(raw_text),
            output_chars=len(improved),
        )
        return improved

    def _accept(self, raw_text: str, completion: str) -> str:
        improved = completion.strip()
        if not improved:
            raise EnhancementRejectedError("AI returned blank completion")
        minimum = len(raw_text) * self._min_length_ratio
        if len(improved) < minimum:
            raise EnhancementRejectedError(
                f"Completion too short: {len(improved)} chars, need at least {minimum:.0f}"
            )
        return improved

    def close(self) -> None:
        self._client.close()
