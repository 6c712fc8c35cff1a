"""Normalization of extracted text into a bounded, storage-safe string."""

import re

MAX_TEXT_LENGTH = 100_000

_LINE_BREAK_RE = re.compile(r"[\t\r\n\v\f]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize(raw: str | None, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Return *raw* without control characters, tabs or whitespace runs.

    Line breaks and tabs become spaces before the remaining control
    characters are dropped, so words on adjacent lines stay separated.
    The result is stripped and cut to *max_length* characters.
    """
    if not raw:
        return ""
    text = _LINE_BREAK_RE.sub(" ", raw)
    text = _CONTROL_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()[:max_length].rstrip()
