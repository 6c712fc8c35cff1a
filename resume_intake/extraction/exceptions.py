class ExtractionError(Exception):
    """Base exception for all resume text extraction errors."""


class FileTooLargeError(ExtractionError):
    """Raised when an uploaded file exceeds the size cap. Nothing is read."""


class BinaryDataDetectedError(ExtractionError):
    """Raised when a plain-text read finds the PDF signature instead of text."""


class FileReadError(ExtractionError):
    """Raised when the file content cannot be read or decoded."""


class InsufficientTextError(ExtractionError):
    """Raised when direct PDF extraction yields too little text to trust."""


class ConversionError(ExtractionError):
    """Raised when a Word document cannot be structurally parsed."""
