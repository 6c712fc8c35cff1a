import re
from abc import ABC, abstractmethod

_CID_ARTIFACT_RE = re.compile(r"\(cid:\d+\)")
# Footer lines such as "Page 2", "Page 2 of 3", "2 / 3" or "- 2 -".
_PAGE_NUMBER_LINE_RE = re.compile(
    r"^\s*(?:page\s+\d+(?:\s*(?:of|/)\s*\d+)?|\d+\s*(?:of|/)\s*\d+|-\s*\d+\s*-)\s*$",
    re.IGNORECASE,
)


class BasePdfExtractor(ABC):
    """Contract for adapters that read a PDF's embedded text layer."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Return the embedded text of every page, joined by newlines.

        Page-number footers and blank pages are dropped. Scanned documents
        without a text layer yield an empty string.

        Raises:
            PdfExtractionError: if the bytes cannot be opened as a PDF.
        """

    @staticmethod
    def _join_pages(pages: list[str]) -> str:
        kept: list[str] = []
        for page in pages:
            lines = [
                line
                for line in _CID_ARTIFACT_RE.sub("", page).splitlines()
                if not _PAGE_NUMBER_LINE_RE.match(line)
            ]
            text = "\n".join(lines).strip()
            if text:
                kept.append(text)
        return "\n".join(kept)
