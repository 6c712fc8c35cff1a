import threading

from resume_intake.ocr.exceptions import OcrCancelledError


class CancellationToken:
    """Thread-safe flag a caller sets to abandon an OCR run."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OcrCancelledError("OCR cancelled by caller")
