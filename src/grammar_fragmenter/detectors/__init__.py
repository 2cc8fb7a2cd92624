from __future__ import annotations

from typing import Any

from ..language import Language
from .base import LanguageDetector
from .fixed_detector import FixedLanguageDetector
from .lingua_detector import LinguaLanguageDetector

__all__ = [
    "LanguageDetector",
    "FixedLanguageDetector",
    "LinguaLanguageDetector",
    "create_detector",
]


def create_detector(name: str, **kwargs: Any) -> LanguageDetector:
    """Factory for building language detectors by name."""
    normalized = name.lower().strip()
    if normalized == "fixed":
        return FixedLanguageDetector(kwargs.get("language", Language.ENGLISH))
    if normalized == "lingua":
        return LinguaLanguageDetector(kwargs.get("settings"))
    raise ValueError(f"Unknown language detector '{name}'.")
