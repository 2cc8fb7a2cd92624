from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Collection

from ..language import Language


class LanguageDetector(ABC):
    """Abstract detector that picks the language of a piece of text."""

    @abstractmethod
    def detect(self, text: str, allowed: Collection[Language]) -> Language | None:
        """Return one of ``allowed`` when confident, otherwise None."""
        raise NotImplementedError
