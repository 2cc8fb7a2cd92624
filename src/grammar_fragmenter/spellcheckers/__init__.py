from __future__ import annotations

from typing import Any

from ..language import Language
from .base import SPELLING_RULE, Spellchecker
from .dictionary_spellchecker import DictionarySpellchecker
from .null_spellchecker import NullSpellchecker
from .pyspellchecker_adapter import PySpellchecker

__all__ = [
    "SPELLING_RULE",
    "Spellchecker",
    "DictionarySpellchecker",
    "NullSpellchecker",
    "PySpellchecker",
    "create_spellchecker",
]


def create_spellchecker(name: str, **kwargs: Any) -> Spellchecker:
    """Factory for building spellcheckers by name."""
    normalized = name.lower().strip()
    if normalized in {"null", "none"}:
        return NullSpellchecker()
    if normalized in {"dictionary", "wordlist"}:
        return DictionarySpellchecker.from_file(
            kwargs["path"], language=kwargs.get("language", Language.ENGLISH)
        )
    if normalized in {"pyspellchecker", "pyspell"}:
        return PySpellchecker(**kwargs)
    raise ValueError(f"Unknown spellchecker '{name}'.")
