from __future__ import annotations

from typing import List

from ..language import Language
from ..models import RawMatch
from ..spellcheckers import Spellchecker
from .base import GrammarEngine


class SpellingOnlyEngine(GrammarEngine):
    """
    Grammar engine that only reports dictionary misses from a spellchecker.
    Lets the checker run offline without a grammar backend.
    """

    def __init__(self, spellchecker: Spellchecker) -> None:
        self._spellchecker = spellchecker

    def check(self, text: str, language: Language) -> List[RawMatch]:
        return [
            RawMatch(range=typo.range, rule=typo.info, suggestions=typo.fixes)
            for typo in self._spellchecker.check(text)
        ]
