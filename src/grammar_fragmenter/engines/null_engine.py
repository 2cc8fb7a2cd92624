from __future__ import annotations

from typing import List

from ..language import Language
from ..models import RawMatch
from .base import GrammarEngine


class NullGrammarEngine(GrammarEngine):
    """Reports nothing. Keeps the checker runnable without a grammar backend."""

    def check(self, text: str, language: Language) -> List[RawMatch]:
        return []
