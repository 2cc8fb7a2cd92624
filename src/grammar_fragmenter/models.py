from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .language import Language


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open character interval ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end}).")

    def with_offset(self, offset: int) -> "TextRange":
        """Return the range shifted by ``offset`` characters."""
        return TextRange(self.start + offset, self.end + offset)

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Identifies the grammar-engine rule behind a match."""

    rule_id: str
    is_dictionary_based_spelling_rule: bool = False
    category: str = ""
    message: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class RawMatch:
    """A single match as reported by a grammar engine, local to the checked text."""

    range: TextRange
    rule: RuleInfo
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Typo:
    """An issue found in the text, tagged with the language it was produced under."""

    range: TextRange
    info: RuleInfo
    fixes: tuple[str, ...]
    language: Language

    @classmethod
    def from_match(cls, match: RawMatch, language: Language) -> "Typo":
        return cls(
            range=match.range,
            info=match.rule,
            fixes=tuple(match.suggestions),
            language=language,
        )

    @property
    def is_spelling(self) -> bool:
        return self.info.is_dictionary_based_spelling_rule

    def with_offset(self, offset: int) -> "Typo":
        return replace(self, range=self.range.with_offset(offset))


@dataclass(slots=True)
class Segment:
    """A piece of text produced by splitting on a separator."""

    range: TextRange
    text: str


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class DocumentReport:
    """Typos found in a document, or ``cancelled`` when the check did not complete."""

    doc_id: str
    typos: list[Typo] = field(default_factory=list)
    cancelled: bool = False


def sorted_typos(typos: Iterable[Typo]) -> list[Typo]:
    """Order typos by position, then by rule id for a stable output."""
    return sorted(
        typos, key=lambda t: (t.range.start, t.range.end, t.info.rule_id, t.fixes)
    )


@dataclass(slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int
