class EnhancementError(Exception):
    """Raised when AI enhancement of extracted text fails."""


class EnhancementNetworkError(EnhancementError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class EnhancementRejectedError(EnhancementError):
    """Raised when a completion is empty, unparseable or suspiciously short."""
