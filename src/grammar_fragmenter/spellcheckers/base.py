from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..language import Language
from ..models import RuleInfo, TextRange, Typo
from ..tokenization import is_checkable_word, tokenize_words

SPELLING_RULE = RuleInfo(
    rule_id="DICTIONARY_SPELLING",
    is_dictionary_based_spelling_rule=True,
    category="TYPOS",
    message="Possible spelling mistake found.",
)


class Spellchecker(ABC):
    """Word-level dictionary lookup, independent of any grammar rules."""

    language: Language = Language.ENGLISH
    max_suggestions: int = 5

    @abstractmethod
    def is_misspelled(self, word: str) -> bool:
        """Return True when ``word`` is not in the dictionary."""
        raise NotImplementedError

    def suggestions(self, word: str) -> List[str]:
        return []

    def check(self, text: str) -> List[Typo]:
        """Return a typo for every misspelled word, with offsets local to ``text``."""
        typos: List[Typo] = []
        for token in tokenize_words(text):
            if not is_checkable_word(token.text) or not self.is_misspelled(token.text):
                continue
            typos.append(
                Typo(
                    range=TextRange(token.start_char, token.end_char),
                    info=SPELLING_RULE,
                    fixes=tuple(self.suggestions(token.text)[: self.max_suggestions]),
                    language=self.language,
                )
            )
        return typos
