from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..language import Language
from .base import Spellchecker


class DictionarySpellchecker(Spellchecker):
    """
    Spellchecker backed by a plain word list. Lookups are case-insensitive;
    suggestions are the known words one edit away, in alphabetical order.
    """

    def __init__(
        self, words: Iterable[str], language: Language = Language.ENGLISH
    ) -> None:
        self._words = {word.strip().lower() for word in words if word.strip()}
        self.language = language

    @classmethod
    def from_file(
        cls, path: str | Path, language: Language = Language.ENGLISH
    ) -> "DictionarySpellchecker":
        """Load one word per line from ``path``."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls(lines, language=language)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def is_misspelled(self, word: str) -> bool:
        return word.lower() not in self._words

    def suggestions(self, word: str) -> List[str]:
        lowered = word.lower()
        return sorted(w for w in self._edits1(lowered) if w in self._words)

    @staticmethod
    def _edits1(word: str) -> set[str]:
        letters = "abcdefghijklmnopqrstuvwxyz"
        splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
        deletes = [left + right[1:] for left, right in splits if right]
        transposes = [
            left + right[1] + right[0] + right[2:]
            for left, right in splits
            if len(right) > 1
        ]
        replaces = [left + c + right[1:] for left, right in splits if right for c in letters]
        inserts = [left + c + right for left, right in splits for c in letters]
        return set(deletes + transposes + replaces + inserts)
