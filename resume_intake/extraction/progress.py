from collections.abc import Callable

from resume_intake.extraction.models import ProgressEvent
from resume_intake.logging.logger import Log

ProgressListener = Callable[[ProgressEvent], None]


class ProgressReporter:
    """Fans advisory progress events out to an optional listener.

    Listener failures are logged and dropped: progress never affects
    whether extraction succeeds.
    """

    def __init__(self, listener: ProgressListener | None = None) -> None:
        self._listener = listener

    def emit(self, stage: str, percent: int, message: str = "") -> None:
        event = ProgressEvent(stage=stage, percent=max(0, min(100, percent)), message=message)
        Log.debug(f"Progress {event.stage}: {event.percent}%")
        if self._listener is None:
            return
        try:
            self._listener(event)
        except Exception as exc:
            Log.warning(f"Progress listener failed: {exc}", stage=stage)
