from abc import ABC, abstractmethod


class BaseEnhancementClient(ABC):
    """Contract for provider-specific completion clients."""

    @abstractmethod
    def complete(self, *, model: str, temperature: float, prompt: str) -> str:
        """Return the provider's free-text completion for *prompt*.

        Raises:
            EnhancementNetworkError: on transport failures, timeouts and bad statuses.
            EnhancementError: when the response carries no usable completion.
        """

    def close(self) -> None:
        """Release the underlying HTTP client."""
