from __future__ import annotations

import re
from typing import Any

_LINE_BREAK_RE = re.compile(r"\r\n?")
_NON_PRINTABLE_RE = re.compile(r"[^\x09\x0A\x0D\x20-\x7E]")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_INLINE_SPACE_RE = re.compile(r"[ \t]{2,}")


def normalize_text(text: Any) -> str:
    """Reduce decoded upload text to printable ASCII with tidy whitespace.

    Anything that is not a string (or is empty) normalizes to ``""``. Content
    is otherwise left as it arrived, so garbled input from a binary upload
    still yields something the downstream metrics can process.
    """
    if not isinstance(text, str) or not text:
        return ""
    cleaned = _LINE_BREAK_RE.sub("\n", text)
    cleaned = _NON_PRINTABLE_RE.sub("", cleaned)
    cleaned = _BLANK_RUN_RE.sub("\n\n", cleaned)
    cleaned = _INLINE_SPACE_RE.sub(" ", cleaned)
    return cleaned.strip()


def non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]
