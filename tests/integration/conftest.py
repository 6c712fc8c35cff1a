import io
from collections.abc import Callable

import httpx
import pytest
import pytesseract
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from resume_intake.config.settings import Settings
from resume_intake.ocr.rasterizer import PdfRasterizer


@pytest.fixture(scope="session")
def integration_settings() -> Settings:
    return Settings()


@pytest.fixture(scope="session")
def tesseract_available(integration_settings: Settings) -> None:
    if integration_settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = integration_settings.tesseract_cmd
    try:
        languages = pytesseract.get_languages(config="")
    except Exception as e:
        pytest.skip(f"Tesseract not available: {e}")
    if integration_settings.ocr_language not in languages:
        pytest.skip(f"Tesseract language '{integration_settings.ocr_language}' not installed")


@pytest.fixture(scope="session")
def ollama_available(integration_settings: Settings) -> None:
    base_url = integration_settings.enhancement_ollama_base_url.rstrip("/")
    try:
        response = httpx.get(f"{base_url}/api/tags", timeout=2)
        response.raise_for_status()
    except httpx.HTTPError as e:
        pytest.skip(f"Ollama not reachable at {base_url}: {e}")
    models = [m.get("name") for m in response.json().get("models", [])]
    if integration_settings.enhancement_ollama_model_name not in models:
        pytest.skip(f"Ollama model {integration_settings.enhancement_ollama_model_name} not pulled")


@pytest.fixture
def image_only_pdf_factory() -> Callable[[list[str]], bytes]:
    """Render text lines, rasterize them, and wrap the images in a new PDF."""

    def _make(lines: list[str]) -> bytes:
        buf = io.BytesIO()
        c = canvas.Canvas(buf, pagesize=letter)
        c.setFont("Helvetica", 20)
        y = 700
        for line in lines:
            c.drawString(72, y, line)
            y -= 34
        c.save()

        scanned = io.BytesIO()
        out = canvas.Canvas(scanned, pagesize=letter)
        width, height = letter
        for image in PdfRasterizer(dpi=200).render(buf.getvalue(), max_pages=1):
            out.drawImage(ImageReader(image), 0, 0, width=width, height=height)
            out.showPage()
        out.save()
        return scanned.getvalue()

    return _make
