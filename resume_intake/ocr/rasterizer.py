from collections.abc import Iterator

import pymupdf
from PIL import Image

from resume_intake.ocr.exceptions import OcrError


class PdfRasterizer:
    """Renders PDF pages to RGB images with PyMuPDF."""

    def __init__(self, dpi: int = 200) -> None:
        self._dpi = dpi

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return int(doc.page_count)
        except Exception as exc:
            raise OcrError(f"Cannot open PDF for rasterization: {exc}") from exc

    def render(self, pdf_bytes: bytes, max_pages: int) -> Iterator[Image.Image]:
        """Yield page images for at most the first *max_pages* pages."""
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise OcrError(f"Cannot open PDF for rasterization: {exc}") from exc
        with doc:
            for index in range(min(doc.page_count, max_pages)):
                try:
                    pixmap = doc[index].get_pixmap(dpi=self._dpi)
                except Exception as exc:
                    raise OcrError(f"Cannot render page {index + 1}: {exc}") from exc
                yield Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
