from __future__ import annotations

from typing import Any, Collection, Dict

from ..language import Language
from .base import GrammarEngine
from .languagetool_engine import LanguageToolEngine
from .null_engine import NullGrammarEngine
from .spelling_engine import SpellingOnlyEngine

__all__ = [
    "GrammarEngine",
    "LanguageToolEngine",
    "NullGrammarEngine",
    "SpellingOnlyEngine",
    "create_engine",
    "create_engines",
]


def create_engine(name: str, **kwargs: Any) -> GrammarEngine:
    """Factory for building grammar engines by name."""
    normalized = name.lower().strip()
    if normalized in {"null", "none"}:
        return NullGrammarEngine()
    if normalized in {"languagetool", "language_tool"}:
        return LanguageToolEngine(kwargs.get("settings"))
    if normalized == "spelling":
        return SpellingOnlyEngine(kwargs["spellchecker"])
    raise ValueError(f"Unknown grammar engine '{name}'.")


def create_engines(
    name: str, languages: Collection[Language], **kwargs: Any
) -> Dict[Language, GrammarEngine]:
    """Build one engine and register it for every language in ``languages``."""
    engine = create_engine(name, **kwargs)
    return {language: engine for language in languages}
