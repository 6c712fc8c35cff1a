from resume_intake.extraction.exceptions import (
    BinaryDataDetectedError,
    FileReadError,
    InsufficientTextError,
)
from resume_intake.extraction.models import UploadedFile
from resume_intake.extraction.sanitizer import MAX_TEXT_LENGTH, sanitize
from resume_intake.extraction.text_reader import PlainTextReader
from resume_intake.logging.logger import Log
from resume_intake.pdf.base import BasePdfExtractor
from resume_intake.pdf.exceptions import PdfExtractionError


class PdfTextExtractor:
    """Direct (non-OCR) text extraction for PDF uploads.

    The upload is first read as plain text. Genuine PDFs are binary, so that
    read reports ``BinaryDataDetectedError`` and the embedded text layer is
    read instead. Either way, fewer than ``min_text_length`` characters is
    treated as noise rather than a resume body.
    """

    def __init__(
        self,
        *,
        text_reader: PlainTextReader,
        text_layer: BasePdfExtractor,
        min_text_length: int = 100,
        max_text_length: int = MAX_TEXT_LENGTH,
    ) -> None:
        self._text_reader = text_reader
        self._text_layer = text_layer
        self._min_text_length = min_text_length
        self._max_text_length = max_text_length

    def extract(self, file: UploadedFile) -> str:
        """Return sanitized direct text of *file*.

        Raises:
            InsufficientTextError: if fewer than ``min_text_length`` chars were found.
            FileReadError: if neither the plain-text read nor the text layer works.
        """
        try:
            text = self._text_reader.read(file)
            source = "plain-text read"
        except BinaryDataDetectedError:
            text = self._read_text_layer(file)
            source = "embedded text layer"

        if len(text) < self._min_text_length:
            raise InsufficientTextError(
                f"Direct extraction of {file.name} yielded {len(text)} chars "
                f"(minimum {self._min_text_length})"
            )
        Log.info(f"Extracted PDF text from {source}", file=file.name, chars=len(text))
        return text

    def _read_text_layer(self, file: UploadedFile) -> str:
        try:
            raw = self._text_layer.extract(bytes(file.content))
        except PdfExtractionError as exc:
            raise FileReadError(str(exc)) from exc
        return sanitize(raw, self._max_text_length)
