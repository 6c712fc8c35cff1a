import json

import httpx

from resume_intake.enhancement.client_base import BaseEnhancementClient
from resume_intake.enhancement.exceptions import EnhancementError, EnhancementNetworkError


class OllamaClientAdapter(BaseEnhancementClient):
    """Completion client for Ollama's ``/api/generate`` endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    def complete(self, *, model: str, temperature: float, prompt: str) -> str:
        try:
            response = self._client.post(
                "/api/generate",
                json={
                    "model": model,
                    "prompt": prompt,
                    "stream": False,
                    "options": {"temperature": temperature},
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise EnhancementNetworkError(
                f"AI provider returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise EnhancementNetworkError(f"AI provider network error: {exc}") from exc

        try:
            payload = json.loads(response.text)
        except json.JSONDecodeError as exc:
            raise EnhancementError(f"Invalid JSON response: {exc}") from exc

        completion = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(completion, str):
            raise EnhancementError("AI response has no 'response' text")
        return completion

    def close(self) -> None:
        self._client.close()
