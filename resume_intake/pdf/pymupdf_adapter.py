import pymupdf

from resume_intake.pdf.base import BasePdfExtractor
from resume_intake.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads the text layer with PyMuPDF in reading order.

    ``sort=True`` orders blocks top-to-bottom, left-to-right, which keeps
    two-column resume layouts from interleaving.
    """

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text("text", sort=True) for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not read text layer: {exc}") from exc
        return self._join_pages(pages)
