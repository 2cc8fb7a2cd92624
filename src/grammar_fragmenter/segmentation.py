from __future__ import annotations

import re
from typing import List

from .models import Segment, TextRange

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n", "?", "!", ".", ";", ",", " ", "\t")

WHITESPACE_RE = re.compile(r"\s+")


def is_blank(text: str) -> bool:
    """Return True for empty text or text made only of whitespace and line breaks."""
    return not text or text.isspace()


def count_words(text: str) -> int:
    """Count the pieces produced by splitting ``text`` on runs of whitespace.

    Leading or trailing whitespace produces an empty piece that is counted too,
    so ``" hello"`` counts as two.
    """
    return len(WHITESPACE_RE.split(text))


def split_with_ranges(text: str, separator: str) -> List[Segment]:
    """Split text on ``separator`` keeping each segment's range within ``text``.

    Segments are kept even when empty, so joining their texts with the
    separator gives back ``text``.
    """
    if len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}.")

    segments: List[Segment] = []
    start = 0
    while True:
        idx = text.find(separator, start)
        end = len(text) if idx == -1 else idx
        segments.append(Segment(range=TextRange(start, end), text=text[start:end]))
        if idx == -1:
            return segments
        start = idx + 1
