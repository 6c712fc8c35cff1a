import io

import pdfplumber

from resume_intake.pdf.base import BasePdfExtractor
from resume_intake.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads the text layer with pdfplumber.

    Resume builders often fake bold type by drawing each glyph twice; those
    duplicate characters are removed before the page text is assembled.
    """

    def __init__(self, x_tolerance: float = 1.5) -> None:
        self._x_tolerance = x_tolerance

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [
                    page.dedupe_chars().extract_text(x_tolerance=self._x_tolerance) or ""
                    for page in pdf.pages
                ]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read text layer: {exc}") from exc
        return self._join_pages(pages)
