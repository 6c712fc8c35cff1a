"""Word document to raw text conversion.

Office Open XML (``.docx``) is parsed structurally with python-docx, in body
order, including table cells. Legacy OLE ``.doc`` files get a best-effort scan
of the ``WordDocument`` stream for printable runs.
"""

import io
import re

import docx
import olefile
from docx.table import Table

from resume_intake.enhancement.base import BaseEnhancer, PassthroughEnhancer
from resume_intake.extraction.exceptions import ConversionError
from resume_intake.extraction.models import UploadedFile
from resume_intake.extraction.progress import ProgressReporter
from resume_intake.extraction.sanitizer import MAX_TEXT_LENGTH, sanitize
from resume_intake.logging.logger import Log

WORD_STAGE = "word"

_ZIP_MAGIC = b"PK\x03\x04"
_PRINTABLE_RUN_RE = re.compile(r"[\x20-\x7e\u00a0-\u024f\u2010-\u2027\r\n\t]{4,}")


class WordExtractor:
    """Converts Word uploads to sanitized text, enhancing substantial results."""

    def __init__(
        self,
        *,
        enhancer: BaseEnhancer | None = None,
        min_text_length: int = 100,
        max_text_length: int = MAX_TEXT_LENGTH,
        progress: ProgressReporter | None = None,
    ) -> None:
        self._enhancer = enhancer or PassthroughEnhancer()
        self._min_text_length = min_text_length
        self._max_text_length = max_text_length
        self._progress = progress or ProgressReporter()

    def extract(self, file: UploadedFile) -> str:
        """Return sanitized text of *file*.

        Raises:
            ConversionError: if the document cannot be parsed.
        """
        self._progress.emit(WORD_STAGE, 0, "Processing Word document...")
        buffer = bytes(file.content)
        self._progress.emit(WORD_STAGE, 30, "Extracting text from Word document...")

        text = self._convert(buffer, file.name)
        self._progress.emit(WORD_STAGE, 80)
        Log.info("Converted Word document", file=file.name, chars=len(text))

        if len(text) > self._min_text_length:
            text = self._enhancer.enhance(text)

        self._progress.emit(WORD_STAGE, 100, "Successfully extracted text from Word document")
        return sanitize(text, self._max_text_length)

    def _convert(self, buffer: bytes, name: str) -> str:
        if buffer.startswith(_ZIP_MAGIC):
            return self._convert_docx(buffer, name)
        if buffer.startswith(olefile.MAGIC):
            return self._convert_legacy_doc(buffer, name)
        raise ConversionError(f"{name} is neither an Office Open XML nor an OLE Word file")

    @staticmethod
    def _convert_docx(buffer: bytes, name: str) -> str:
        try:
            document = docx.Document(io.BytesIO(buffer))
            blocks: list[str] = []
            for block in document.iter_inner_content():
                if isinstance(block, Table):
                    blocks.extend(
                        "\t".join(cell.text for cell in row.cells) for row in block.rows
                    )
                else:
                    blocks.append(block.text)
        except Exception as exc:
            raise ConversionError(f"Cannot parse {name}: {exc}") from exc
        return "\n".join(blocks).strip()

    @staticmethod
    def _convert_legacy_doc(buffer: bytes, name: str) -> str:
        try:
            with olefile.OleFileIO(io.BytesIO(buffer)) as ole:
                if not ole.exists("WordDocument"):
                    raise ConversionError(f"{name} has no WordDocument stream")
                data = ole.openstream("WordDocument").read()
        except ConversionError:
            raise
        except Exception as exc:
            raise ConversionError(f"Cannot open legacy Word file {name}: {exc}") from exc

        candidates = (
            _PRINTABLE_RUN_RE.findall(data.decode("utf-16-le", errors="ignore")),
            _PRINTABLE_RUN_RE.findall(data.decode("cp1252", errors="ignore")),
        )
        runs = max(candidates, key=lambda found: sum(len(run) for run in found))
        text = "\n".join(run.strip() for run in runs if run.strip())
        if not text:
            raise ConversionError(f"No readable text in legacy Word file {name}")
        Log.warning("Legacy .doc extracted with best-effort scan", file=name)
        return text
