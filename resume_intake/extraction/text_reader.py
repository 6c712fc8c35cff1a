from charset_normalizer import from_bytes

from resume_intake.extraction.exceptions import BinaryDataDetectedError, FileReadError
from resume_intake.extraction.models import UploadedFile
from resume_intake.extraction.sanitizer import MAX_TEXT_LENGTH, sanitize
from resume_intake.logging.logger import Log

PDF_SIGNATURE = b"%PDF-"
_UTF8_BOM = b"\xef\xbb\xbf"


def has_pdf_signature(content: bytes) -> bool:
    """True when *content* starts with ``%PDF-`` (a UTF-8 BOM is ignored)."""
    return content.removeprefix(_UTF8_BOM).startswith(PDF_SIGNATURE)


class PlainTextReader:
    """Reads an upload as text and refuses PDF bytes posing as text."""

    def __init__(self, max_text_length: int = MAX_TEXT_LENGTH) -> None:
        self._max_text_length = max_text_length

    def read(self, file: UploadedFile) -> str:
        """Decode *file* and return sanitized text.

        Raises:
            BinaryDataDetectedError: if the content starts with ``%PDF-``.
            FileReadError: if the content is not a byte string.
        """
        if not isinstance(file.content, (bytes, bytearray)):
            raise FileReadError(f"Cannot read {file.name}: content is not bytes")
        if has_pdf_signature(bytes(file.content)):
            Log.info("PDF signature found in plain-text read", file=file.name)
            raise BinaryDataDetectedError(f"{file.name} contains raw PDF data")
        return sanitize(self._decode(bytes(file.content), file.name), self._max_text_length)

    @staticmethod
    def _decode(content: bytes, name: str) -> str:
        try:
            return content.removeprefix(_UTF8_BOM).decode("utf-8")
        except UnicodeDecodeError:
            pass

        match = from_bytes(content).best()
        if match is not None:
            Log.debug(f"Detected {match.encoding} encoding", file=name)
            return str(match)
        # Binary noise; the sanitizer drops what cannot be represented.
        return content.decode("utf-8", errors="replace")
