"""OCR fallback for image-only PDFs.

One call walks Idle -> Initializing -> Recognizing -> Done, or fails from any
state. The worker is acquired per call and terminated on every exit path,
including cancellation. Recognized text is passed through the enhancer
before it is returned.
"""

from resume_intake.enhancement.base import BaseEnhancer, PassthroughEnhancer
from resume_intake.extraction.models import OcrProgress, UploadedFile
from resume_intake.extraction.progress import ProgressReporter
from resume_intake.extraction.sanitizer import MAX_TEXT_LENGTH, sanitize
from resume_intake.logging.logger import Log
from resume_intake.ocr.base import OcrWorkerFactory, acquire_worker
from resume_intake.ocr.cancellation import CancellationToken
from resume_intake.ocr.exceptions import OcrError
from resume_intake.ocr.rasterizer import PdfRasterizer

OCR_STAGE = "ocr"


class OcrExtractor:
    """Rasterizes up to ``max_pages`` PDF pages and recognizes their text."""

    def __init__(
        self,
        *,
        worker_factory: OcrWorkerFactory,
        rasterizer: PdfRasterizer | None = None,
        enhancer: BaseEnhancer | None = None,
        language: str = "eng",
        max_pages: int = 5,
        max_text_length: int = MAX_TEXT_LENGTH,
        progress: ProgressReporter | None = None,
    ) -> None:
        self._worker_factory = worker_factory
        self._rasterizer = rasterizer or PdfRasterizer()
        self._enhancer = enhancer or PassthroughEnhancer()
        self._language = language
        self._max_pages = max_pages
        self._max_text_length = max_text_length
        self._progress = progress or ProgressReporter()
        self.state = OcrProgress()

    def extract(self, file: UploadedFile, cancel: CancellationToken | None = None) -> str:
        """Return sanitized, enhanced OCR text for *file*.

        Raises:
            OcrError: if the engine cannot start or recognition fails.
            OcrCancelledError: if *cancel* is set before recognition completes.
        """
        cancel = cancel or CancellationToken()
        self.state.processing = True
        self._report(0, "Processing PDF with OCR. This may take a moment...")
        try:
            raw_text = self._recognize(file, cancel)
        except OcrError as exc:
            Log.error(f"OCR processing failed: {exc}", file=file.name)
            raise
        except Exception as exc:
            Log.error(f"OCR engine error: {exc}", file=file.name)
            raise OcrError(f"OCR engine error: {exc}") from exc
        finally:
            self.state.reset()

        Log.info("OCR processing complete", file=file.name, chars=len(raw_text))
        return sanitize(self._enhancer.enhance(raw_text), self._max_text_length)

    def _recognize(self, file: UploadedFile, cancel: CancellationToken) -> str:
        pages: list[str] = []
        with acquire_worker(self._worker_factory, self._language) as worker:
            cancel.raise_if_cancelled()
            total = min(self._rasterizer.page_count(file.content), self._max_pages)
            Log.info(f"Running OCR on {total} page(s)", file=file.name, cap=self._max_pages)
            for image in self._rasterizer.render(file.content, self._max_pages):
                cancel.raise_if_cancelled()
                pages.append(worker.recognize(image).strip())
                self._report(round(len(pages) / max(total, 1) * 99))
            cancel.raise_if_cancelled()

        self._report(100, "OCR processing complete!")
        return "\n\n".join(page for page in pages if page)

    def _report(self, percent: int, message: str = "") -> None:
        self.state.percent = percent
        self._progress.emit(OCR_STAGE, percent, message or f"OCR Processing: {percent}%")
