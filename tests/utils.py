from __future__ import annotations

import re
from typing import Callable, Dict, List

from grammar_fragmenter.collaborators import Collaborators
from grammar_fragmenter.config import ConfigSnapshot
from grammar_fragmenter.detectors import FixedLanguageDetector
from grammar_fragmenter.engines import GrammarEngine
from grammar_fragmenter.errors import ToolFailure
from grammar_fragmenter.language import Language
from grammar_fragmenter.models import RawMatch, RuleInfo, TextRange
from grammar_fragmenter.spellcheckers import DictionarySpellchecker, Spellchecker

SPELLING = RuleInfo(
    rule_id="MORFOLOGIK_RULE_EN_US",
    is_dictionary_based_spelling_rule=True,
    category="TYPOS",
)
GRAMMAR = RuleInfo(rule_id="UPPERCASE_SENTENCE_START", category="CASING")

ENGLISH_WORDS = [
    "world",
    "this",
    "is",
    "fine",
    "the",
    "cat",
    "sat",
    "on",
    "mat",
    "a",
    "sentence",
    "here",
    "second",
    "third",
    "part",
]


class ScriptedEngine(GrammarEngine):
    """Flags every whole-word occurrence of the configured words."""

    def __init__(
        self,
        rules: Dict[str, RuleInfo] | None = None,
        *,
        fixes: Dict[str, tuple[str, ...]] | None = None,
        fail_when: str | None = None,
        duplicate: bool = False,
        on_call: Callable[[str], None] | None = None,
    ) -> None:
        self.rules = rules or {}
        self.fixes = fixes or {}
        self.fail_when = fail_when
        self.duplicate = duplicate
        self.on_call = on_call
        self.calls: List[str] = []

    def check(self, text: str, language: Language) -> List[RawMatch]:
        self.calls.append(text)
        if self.on_call is not None:
            self.on_call(text)
        if self.fail_when is not None and self.fail_when in text:
            raise ToolFailure("backend exploded")
        matches: List[RawMatch] = []
        for word, rule in self.rules.items():
            for found in re.finditer(rf"\b{re.escape(word)}\b", text):
                matches.append(
                    RawMatch(
                        range=TextRange(found.start(), found.end()),
                        rule=rule,
                        suggestions=self.fixes.get(word, ()),
                    )
                )
        if self.duplicate:
            matches = matches + matches
        return matches


def english_spellchecker() -> Spellchecker:
    return DictionarySpellchecker(ENGLISH_WORDS)


def make_collaborators(
    engine: GrammarEngine,
    *,
    language: Language = Language.ENGLISH,
    spellchecker: Spellchecker | None = None,
    **kwargs,
) -> Collaborators:
    return Collaborators(
        detector=FixedLanguageDetector(language),
        engines={language: engine},
        spellchecker=spellchecker or english_spellchecker(),
        **kwargs,
    )


def make_snapshot(**overrides) -> ConfigSnapshot:
    overrides.setdefault("enabled_languages", frozenset({Language.ENGLISH}))
    return ConfigSnapshot(**overrides)
