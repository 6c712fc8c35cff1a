from abc import ABC, abstractmethod

from resume_intake.extraction.exceptions import ExtractionError
from resume_intake.extraction.models import ExtractionAttempt, ExtractionMethod, UploadedFile
from resume_intake.extraction.pdf_extractor import PdfTextExtractor
from resume_intake.extraction.text_reader import PlainTextReader
from resume_intake.extraction.word_extractor import WordExtractor
from resume_intake.logging.logger import Log
from resume_intake.ocr.cancellation import CancellationToken
from resume_intake.ocr.exceptions import OcrError
from resume_intake.ocr.extractor import OcrExtractor


class ExtractionStep(ABC):
    """One link of a fallback chain: runs one method, never raises."""

    method: ExtractionMethod

    def run(self, file: UploadedFile, cancel: CancellationToken | None = None) -> ExtractionAttempt:
        try:
            text = self.extract(file, cancel)
        except (ExtractionError, OcrError) as exc:
            Log.warning(
                f"{self.method.value} failed: {exc}",
                file=file.name,
                error=type(exc).__name__,
            )
            return ExtractionAttempt(method=self.method, error=exc)
        except Exception as exc:
            Log.error(f"Unexpected {self.method.value} error: {exc}", file=file.name)
            return ExtractionAttempt(method=self.method, error=exc)
        return ExtractionAttempt(method=self.method, text=text, succeeded=True)

    @abstractmethod
    def extract(self, file: UploadedFile, cancel: CancellationToken | None) -> str:
        raise NotImplementedError


class PlainTextStep(ExtractionStep):
    method = ExtractionMethod.TEXT_FILE

    def __init__(self, reader: PlainTextReader) -> None:
        self._reader = reader

    def extract(self, file: UploadedFile, cancel: CancellationToken | None) -> str:
        return self._reader.read(file)


class WordDocumentStep(ExtractionStep):
    method = ExtractionMethod.WORD_DOCUMENT

    def __init__(self, extractor: WordExtractor) -> None:
        self._extractor = extractor

    def extract(self, file: UploadedFile, cancel: CancellationToken | None) -> str:
        return self._extractor.extract(file)


class PdfTextStep(ExtractionStep):
    method = ExtractionMethod.PDF_EXTRACTION

    def __init__(self, extractor: PdfTextExtractor) -> None:
        self._extractor = extractor

    def extract(self, file: UploadedFile, cancel: CancellationToken | None) -> str:
        return self._extractor.extract(file)


class OcrStep(ExtractionStep):
    method = ExtractionMethod.OCR

    def __init__(self, extractor: OcrExtractor) -> None:
        self._extractor = extractor

    def extract(self, file: UploadedFile, cancel: CancellationToken | None) -> str:
        return self._extractor.extract(file, cancel)
