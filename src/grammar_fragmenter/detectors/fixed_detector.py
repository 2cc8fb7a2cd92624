from __future__ import annotations

from typing import Collection

from ..language import Language
from .base import LanguageDetector


class FixedLanguageDetector(LanguageDetector):
    """
    Assumes every text is written in one language. Texts without a single
    letter get no language, and neither does anything when that language is
    not enabled.
    """

    def __init__(self, language: Language = Language.ENGLISH) -> None:
        self.language = language

    def detect(self, text: str, allowed: Collection[Language]) -> Language | None:
        if self.language not in allowed:
            return None
        if not any(ch.isalpha() for ch in text):
            return None
        return self.language
