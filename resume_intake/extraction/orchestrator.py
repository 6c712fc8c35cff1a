"""Method selection and fallback policy for resume text extraction.

The fallback policy is the ``chains`` table: each file kind maps to an
ordered tuple of steps, and the first successful step decides the method
tag. When a chain is exhausted, a placeholder describing the file is
returned with method ``failed``. The only error that reaches the caller is
``FileTooLargeError``, raised before anything is read.
"""

from collections.abc import Mapping, Sequence
from enum import Enum

from resume_intake.config.settings import Settings
from resume_intake.enhancement.base import BaseEnhancer
from resume_intake.enhancement.factory import EnhancerFactory
from resume_intake.extraction.exceptions import FileTooLargeError
from resume_intake.extraction.models import (
    ExtractionAttempt,
    ExtractionMethod,
    ExtractionResult,
    UploadedFile,
)
from resume_intake.extraction.pdf_extractor import PdfTextExtractor
from resume_intake.extraction.progress import ProgressListener, ProgressReporter
from resume_intake.extraction.sanitizer import MAX_TEXT_LENGTH, sanitize
from resume_intake.extraction.steps import (
    ExtractionStep,
    OcrStep,
    PdfTextStep,
    PlainTextStep,
    WordDocumentStep,
)
from resume_intake.extraction.text_reader import PlainTextReader
from resume_intake.extraction.word_extractor import WordExtractor
from resume_intake.logging.logger import Log
from resume_intake.ocr.cancellation import CancellationToken
from resume_intake.ocr.extractor import OcrExtractor
from resume_intake.ocr.rasterizer import PdfRasterizer
from resume_intake.ocr.tesseract_worker import TesseractWorker
from resume_intake.pdf.factory import PdfExtractorFactory

MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024

PDF_MIME_TYPES = frozenset({"application/pdf"})
WORD_MIME_TYPES = frozenset({
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
})
TEXT_MIME_TYPES = frozenset({"text/plain"})

_PLACEHOLDER_HINT = (
    "[The file content could not be automatically extracted. Please try a "
    "different file format (like .txt) or ensure the file is not corrupted "
    "or password protected.]"
)


class FileKind(str, Enum):
    PDF = "pdf"
    WORD = "word"
    TEXT = "text"
    UNKNOWN = "unknown"


def classify(file: UploadedFile) -> FileKind:
    """Map the declared MIME type or file extension to a chain key."""
    mime_type = file.mime_type.split(";")[0].strip().lower()
    if mime_type in PDF_MIME_TYPES or file.extension == ".pdf":
        return FileKind.PDF
    if mime_type in WORD_MIME_TYPES or file.extension in (".docx", ".doc"):
        return FileKind.WORD
    if mime_type in TEXT_MIME_TYPES or file.extension == ".txt":
        return FileKind.TEXT
    return FileKind.UNKNOWN


def check_file_size(name: str, size: int, max_file_size_bytes: int) -> None:
    """Reject a file by its declared size, before any of its content is read.

    Raises:
        FileTooLargeError: if *size* exceeds *max_file_size_bytes*.
    """
    if size > max_file_size_bytes:
        raise FileTooLargeError(
            f"{name} is {size} bytes; the limit is {max_file_size_bytes} bytes"
        )


def placeholder_text(file: UploadedFile) -> str:
    """Describe *file* when none of its extraction methods worked."""
    modified = (
        file.last_modified.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
        if file.last_modified is not None
        else "unknown"
    )
    return (
        f"Could not extract text from {file.name} ({file.mime_type or 'unknown type'})\n\n"
        f"File size: {round(file.size / 1024)} KB\n"
        f"Last modified: {modified}\n\n"
        f"{_PLACEHOLDER_HINT}"
    )


class ExtractionOrchestrator:
    """Runs the fallback chain for one upload and builds the ExtractionResult."""

    def __init__(
        self,
        chains: Mapping[FileKind, Sequence[ExtractionStep]],
        *,
        max_file_size_bytes: int = MAX_FILE_SIZE_BYTES,
        min_text_length: int = 100,
        max_text_length: int = MAX_TEXT_LENGTH,
        progress: ProgressReporter | None = None,
    ) -> None:
        missing = [kind.value for kind in FileKind if kind not in chains]
        if missing:
            raise ValueError(f"No extraction chain configured for: {missing}")
        self._chains = {kind: tuple(steps) for kind, steps in chains.items()}
        self._max_file_size_bytes = max_file_size_bytes
        self._min_text_length = min_text_length
        self._max_text_length = max_text_length
        self._progress = progress or ProgressReporter()

    def extract(
        self,
        file: UploadedFile,
        cancel: CancellationToken | None = None,
    ) -> ExtractionResult:
        """Extract resume text from *file*.

        Raises:
            FileTooLargeError: if the declared size exceeds the cap.
        """
        check_file_size(file.name, file.size, self._max_file_size_bytes)

        kind = classify(file)
        chain = self._chains[kind]
        Log.info(
            f"Extracting {kind.value} upload",
            file=file.name,
            size=file.size,
            chain=[step.method.value for step in chain],
        )
        self._progress.emit("extract", 0, "Processing file...")

        attempts: list[ExtractionAttempt] = []
        for step in chain:
            attempt = step.run(file, cancel)
            attempts.append(attempt)
            if attempt.succeeded:
                return self._finish(file, kind, attempt.method, attempt.text)

        Log.error(
            "All extraction methods failed, storing placeholder",
            file=file.name,
            attempts=[
                f"{a.method.value}:{type(a.error).__name__}" for a in attempts
            ],
        )
        return self._finish(file, kind, ExtractionMethod.FAILED, placeholder_text(file))

    def _finish(
        self,
        file: UploadedFile,
        kind: FileKind,
        method: ExtractionMethod,
        text: str,
    ) -> ExtractionResult:
        result = ExtractionResult(
            text=sanitize(text, self._max_text_length),
            method=method,
            is_pdf=kind is FileKind.PDF,
            file_name=file.name,
            file_size=file.size,
            file_type=file.mime_type,
            min_text_length=self._min_text_length,
        )
        self._progress.emit("extract", 100, f"Finished with {method.value}")
        if result.needs_warning:
            Log.warning(
                "Extracted text may be unusable",
                file=file.name,
                method=method.value,
                chars=len(result.text),
            )
        else:
            Log.info(
                "Extraction complete",
                file=file.name,
                method=method.value,
                chars=len(result.text),
            )
        return result


def build_orchestrator(
    settings: Settings,
    progress_listener: ProgressListener | None = None,
    enhancer: BaseEnhancer | None = None,
) -> ExtractionOrchestrator:
    """Build an ExtractionOrchestrator with all configured adapters."""
    progress = ProgressReporter(progress_listener)
    enhancer = enhancer or EnhancerFactory.create(settings)
    text_reader = PlainTextReader(max_text_length=settings.max_text_length)

    pdf_step = PdfTextStep(
        PdfTextExtractor(
            text_reader=text_reader,
            text_layer=PdfExtractorFactory.create(settings),
            min_text_length=settings.min_text_length,
            max_text_length=settings.max_text_length,
        )
    )
    ocr_step = OcrStep(
        OcrExtractor(
            worker_factory=lambda: TesseractWorker(settings.tesseract_cmd),
            rasterizer=PdfRasterizer(dpi=settings.ocr_dpi),
            enhancer=enhancer,
            language=settings.ocr_language,
            max_pages=settings.ocr_max_pages,
            max_text_length=settings.max_text_length,
            progress=progress,
        )
    )
    word_step = WordDocumentStep(
        WordExtractor(
            enhancer=enhancer,
            min_text_length=settings.min_text_length,
            max_text_length=settings.max_text_length,
            progress=progress,
        )
    )
    text_step = PlainTextStep(text_reader)

    return ExtractionOrchestrator(
        chains={
            FileKind.PDF: (pdf_step, ocr_step),
            FileKind.WORD: (word_step,),
            FileKind.TEXT: (text_step,),
            FileKind.UNKNOWN: (text_step,),
        },
        max_file_size_bytes=settings.max_file_size_bytes,
        min_text_length=settings.min_text_length,
        max_text_length=settings.max_text_length,
        progress=progress,
    )
