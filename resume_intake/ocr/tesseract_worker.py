import pytesseract
from PIL import Image

from resume_intake.ocr.base import BaseOcrWorker
from resume_intake.ocr.exceptions import OcrError


class TesseractWorker(BaseOcrWorker):
    """Recognition through the tesseract binary via pytesseract."""

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self._language: str | None = None

    def load(self, language: str) -> None:
        try:
            pytesseract.get_tesseract_version()
            available = pytesseract.get_languages(config="")
        except (pytesseract.TesseractNotFoundError, pytesseract.TesseractError, OSError) as exc:
            raise OcrError(f"Tesseract is not available: {exc}") from exc
        missing = [lang for lang in language.split("+") if lang not in available]
        if missing:
            raise OcrError(f"Tesseract language model(s) not installed: {missing}")
        self._language = language

    def recognize(self, image: Image.Image) -> str:
        if self._language is None:
            raise OcrError("Tesseract worker used before load()")
        try:
            return pytesseract.image_to_string(image, lang=self._language)
        except (pytesseract.TesseractError, RuntimeError, OSError) as exc:
            raise OcrError(f"Tesseract recognition failed: {exc}") from exc

    def terminate(self) -> None:
        self._language = None
