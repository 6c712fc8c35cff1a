from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from PIL import Image

from resume_intake.logging.logger import Log


class BaseOcrWorker(ABC):
    """Contract for a recognition engine instance.

    A worker is created, loaded, used and terminated by exactly one OCR run.
    """

    @abstractmethod
    def load(self, language: str) -> None:
        """Prepare the engine for *language*.

        Raises:
            OcrError: if the engine or the language model is unavailable.
        """

    @abstractmethod
    def recognize(self, image: Image.Image) -> str:
        """Return the text recognized on one page image.

        Raises:
            OcrError: if recognition fails.
        """

    @abstractmethod
    def terminate(self) -> None:
        """Release engine resources. Called once per worker."""


OcrWorkerFactory = Callable[[], BaseOcrWorker]


@contextmanager
def acquire_worker(factory: OcrWorkerFactory, language: str) -> Iterator[BaseOcrWorker]:
    """Yield a loaded worker and terminate it on every exit path."""
    worker = factory()
    try:
        worker.load(language)
        yield worker
    finally:
        try:
            worker.terminate()
        except Exception as exc:
            Log.error(f"Error terminating OCR worker: {exc}")
