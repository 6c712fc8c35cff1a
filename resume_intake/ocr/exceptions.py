class OcrError(Exception):
    """Raised when the recognition engine cannot start or fails mid-run."""


class OcrCancelledError(OcrError):
    """Raised when the caller abandons an in-flight recognition."""
