import io
from collections.abc import Callable
from datetime import datetime, timezone

import docx
import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_intake.extraction.models import UploadedFile
from resume_intake.ocr.base import BaseOcrWorker
from resume_intake.ocr.exceptions import OcrError

RESUME_LINE = "Senior software engineer with ten years of Python, SQL and cloud delivery."


def _blank_pdf(pages: int) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for _ in range(pages):
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Doe Resume")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def text_layer_pdf_bytes() -> bytes:
    """One page carrying roughly 4,500 characters of selectable text."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setFont("Helvetica", 8)
    y = 760
    for _ in range(60):
        c.drawString(36, y, RESUME_LINE)
        y -= 12
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _blank_pdf(1)


@pytest.fixture()
def scanned_pdf_factory() -> Callable[[int], bytes]:
    """Image-only stand-in: pages without a text layer."""
    return _blank_pdf


@pytest.fixture()
def docx_factory() -> Callable[..., bytes]:
    def _make(paragraphs: list[str], table: list[list[str]] | None = None) -> bytes:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            grid = document.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    grid.cell(r, c).text = value
        buf = io.BytesIO()
        document.save(buf)
        return buf.getvalue()

    return _make


@pytest.fixture()
def upload_factory() -> Callable[..., UploadedFile]:
    def _make(
        name: str,
        content: bytes,
        mime_type: str = "",
        size: int | None = None,
    ) -> UploadedFile:
        return UploadedFile(
            name=name,
            mime_type=mime_type,
            content=content,
            size=len(content) if size is None else size,
            last_modified=datetime(2025, 4, 12, 9, 30, tzinfo=timezone.utc),
        )

    return _make


class FakeOcrWorker(BaseOcrWorker):
    """Records lifecycle calls; returns one line of text per page."""

    def __init__(
        self,
        *,
        fail_on_load: bool = False,
        fail_on_page: int | None = None,
        on_page: Callable[[int], None] | None = None,
    ) -> None:
        self.fail_on_load = fail_on_load
        self.fail_on_page = fail_on_page
        self.on_page = on_page
        self.language: str | None = None
        self.pages_seen = 0
        self.terminate_calls = 0

    def load(self, language: str) -> None:
        if self.fail_on_load:
            raise OcrError("engine failed to initialize")
        self.language = language

    def recognize(self, image: Image.Image) -> str:
        self.pages_seen += 1
        if self.on_page is not None:
            self.on_page(self.pages_seen)
        if self.fail_on_page == self.pages_seen:
            raise RuntimeError("engine crashed")
        return f"page {self.pages_seen} text"

    def terminate(self) -> None:
        self.terminate_calls += 1


@pytest.fixture()
def fake_worker() -> FakeOcrWorker:
    return FakeOcrWorker()


@pytest.fixture()
def fake_worker_cls() -> type[FakeOcrWorker]:
    return FakeOcrWorker
