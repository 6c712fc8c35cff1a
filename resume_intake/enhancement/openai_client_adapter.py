import httpx
import openai

from resume_intake.enhancement.client_base import BaseEnhancementClient
from resume_intake.enhancement.exceptions import EnhancementError, EnhancementNetworkError


class OpenAIClientAdapter(BaseEnhancementClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def complete(self, *, model: str, temperature: float, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise EnhancementNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise EnhancementNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise EnhancementError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise EnhancementError("AI returned empty response")
        return content

    def close(self) -> None:
        self._client.close()
