from collections.abc import Callable
from typing import ClassVar

from resume_intake.config.settings import Settings
from resume_intake.pdf.base import BasePdfExtractor
from resume_intake.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_intake.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Builds the text-layer adapter named by ``settings.pdf_engine``."""

    ADAPTERS: ClassVar[dict[str, Callable[[Settings], BasePdfExtractor]]] = {
        "pdfplumber": lambda settings: PdfPlumberAdapter(x_tolerance=settings.pdf_x_tolerance),
        "pymupdf": lambda settings: PyMuPdfAdapter(),
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        build = cls.ADAPTERS.get(engine)
        if build is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return build(settings)
