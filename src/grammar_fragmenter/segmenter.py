from __future__ import annotations

from typing import FrozenSet, Sequence, Set

from .analyzer import analyze_fragment
from .collaborators import Collaborators
from .config import ConfigSnapshot
from .models import Typo
from .segmentation import count_words, is_blank, split_with_ranges


def analyze(
    text: str,
    snapshot: ConfigSnapshot,
    collaborators: Collaborators,
    separators: Sequence[str] | None = None,
) -> FrozenSet[Typo]:
    """Return typos for ``text`` with offsets into ``text``.

    Long texts are split recursively into fragments small enough for a
    grammar engine. Separators are tried coarse to fine; a segment is only
    split further while it exceeds ``max_fragment_chars`` and finer
    separators remain.

    ``separators`` defaults to the snapshot's separators. Raises
    AnalysisCancelled when the collaborators' checkpoint aborts the check.
    """
    seps = tuple(separators) if separators is not None else snapshot.separators
    return frozenset(_analyze(text, seps, 0, snapshot, collaborators))


def _analyze(
    text: str,
    separators: tuple[str, ...],
    depth: int,
    snapshot: ConfigSnapshot,
    collaborators: Collaborators,
) -> Set[Typo]:
    if is_blank(text):
        return set()

    if count_words(text) < snapshot.min_words:
        if not snapshot.enabled_spellcheck:
            return set()
        return set(collaborators.spellchecker.check(text))

    if depth >= len(separators):
        return set(analyze_fragment(text, snapshot, collaborators))

    has_finer = depth + 1 < len(separators)
    typos: Set[Typo] = set()
    for segment in split_with_ranges(text, separators[depth]):
        if len(segment.text) > snapshot.max_fragment_chars and has_finer:
            found = _analyze(segment.text, separators, depth + 1, snapshot, collaborators)
        else:
            found = analyze_fragment(segment.text, snapshot, collaborators)
        typos.update(typo.with_offset(segment.range.start) for typo in found)
    return typos
