from abc import ABC, abstractmethod


class BaseEnhancer(ABC):
    """Contract for best-effort text enhancement."""

    @abstractmethod
    def enhance(self, raw_text: str) -> str:
        """Return an improved version of *raw_text*, or *raw_text* itself.

        Implementations never raise: any failure yields the input unchanged.
        """

    def close(self) -> None:
        """Release provider connections. Safe to call more than once."""


class PassthroughEnhancer(BaseEnhancer):
    """Used when enhancement is disabled."""

    def enhance(self, raw_text: str) -> str:
        return raw_text
