from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Callable, List, cast

from ..language import Language
from .base import Spellchecker

logger = logging.getLogger(__name__)

SpellChecker: Callable[..., Any] | None = None

# Dictionaries shipped with pyspellchecker.
SUPPORTED_LANGUAGES = {
    Language.ENGLISH: "en",
    Language.BRITISH_ENGLISH: "en",
    Language.GERMAN: "de",
    Language.FRENCH: "fr",
    Language.SPANISH: "es",
    Language.ITALIAN: "it",
    Language.PORTUGUESE: "pt",
    Language.DUTCH: "nl",
    Language.RUSSIAN: "ru",
    Language.PERSIAN: "fa",
}


class PySpellchecker(Spellchecker):
    """Spellchecker implementation backed by the pyspellchecker package."""

    def __init__(
        self,
        language: Language = Language.ENGLISH,
        *,
        distance: int = 2,
        case_sensitive: bool = False,
    ) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"pyspellchecker has no dictionary for '{language}'.")
        self.language = language
        self._distance = distance
        self._case_sensitive = case_sensitive
        self._factory = _load_spellchecker_factory()
        self._spell: Any | None = None
        self._lock = threading.Lock()

    def is_misspelled(self, word: str) -> bool:
        spell = self._ensure_spell()
        return bool(spell.unknown([word]))

    def suggestions(self, word: str) -> List[str]:
        spell = self._ensure_spell()
        candidates = spell.candidates(word) or set()
        best = spell.correction(word)
        ordered = sorted(candidates, key=lambda c: (c != best, c))
        return [c for c in ordered if c != word]

    def _ensure_spell(self) -> Any:
        with self._lock:
            if self._spell is None:
                logger.debug("Loading pyspellchecker dictionary for %s", self.language)
                self._spell = self._factory(
                    language=SUPPORTED_LANGUAGES[self.language],
                    distance=self._distance,
                    case_sensitive=self._case_sensitive,
                )
            return self._spell


def _load_spellchecker_factory() -> Callable[..., Any]:
    """Import pyspellchecker lazily so it stays an optional dependency."""
    global SpellChecker
    if SpellChecker is not None:
        return SpellChecker
    try:  # pragma: no cover - import guard
        module = importlib.import_module("spellchecker")
    except Exception as exc:  # pragma: no cover - handled at runtime
        raise RuntimeError(
            "pyspellchecker is not installed. Install extras via 'pip install .[pyspellchecker]'."
        ) from exc
    SpellChecker = cast(Callable[..., Any], getattr(module, "SpellChecker"))
    return SpellChecker
