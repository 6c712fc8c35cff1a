from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path


class ExtractionMethod(str, Enum):
    """Which strategy produced the stored text."""

    TEXT_FILE = "text_file"
    WORD_DOCUMENT = "word_document"
    PDF_EXTRACTION = "pdf_extraction"
    OCR = "ocr"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadedFile:
    """Immutable upload as handed over by the UI collaborator."""

    name: str
    mime_type: str
    content: bytes = field(repr=False)
    size: int = -1
    last_modified: datetime | None = None

    def __post_init__(self) -> None:
        if self.size < 0:
            object.__setattr__(self, "size", len(self.content))

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower()

    @classmethod
    def from_path(cls, path: Path, mime_type: str = "") -> "UploadedFile":
        """Build an upload from a file on disk, using its mtime as last_modified."""
        stat = path.stat()
        return cls(
            name=path.name,
            mime_type=mime_type,
            content=path.read_bytes(),
            size=stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )


@dataclass(frozen=True)
class ExtractionAttempt:
    """One try of one method against one file. Never persisted."""

    method: ExtractionMethod
    text: str = ""
    succeeded: bool = False
    error: Exception | None = None


@dataclass(frozen=True)
class ExtractionResult:
    """Final output of one orchestration run; text is already sanitized."""

    text: str
    method: ExtractionMethod
    is_pdf: bool
    file_name: str = ""
    file_size: int = 0
    file_type: str = ""
    min_text_length: int = 100

    @property
    def needs_warning(self) -> bool:
        """True when the caller should keep a non-blocking warning visible."""
        return (
            self.method is ExtractionMethod.FAILED
            or len(self.text) < self.min_text_length
        )

    def to_record(self) -> dict[str, object]:
        """Columns written next to the application row."""
        return {
            "resume_txt": self.text,
            "file_name": self.file_name,
            "file_size": self.file_size,
            "file_type": self.file_type,
            "is_pdf": self.is_pdf,
            "storage_status": "text_only",
            "text_extraction_method": self.method.value,
        }


@dataclass
class OcrProgress:
    """UI-facing OCR state; owned by one recognition call at a time."""

    percent: int = 0
    processing: bool = False

    def reset(self) -> None:
        self.percent = 0
        self.processing = False


@dataclass(frozen=True)
class ProgressEvent:
    """Advisory progress notification for a pipeline stage."""

    stage: str
    percent: int
    message: str = ""
