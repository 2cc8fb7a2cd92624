from __future__ import annotations

import logging
from typing import FrozenSet, List

from .collaborators import Collaborators
from .config import ConfigSnapshot
from .errors import OutcomeStatus, run_engine
from .language import Language
from .models import Typo
from .spellcheckers import Spellchecker

logger = logging.getLogger(__name__)


def analyze_fragment(
    fragment: str, snapshot: ConfigSnapshot, collaborators: Collaborators
) -> FrozenSet[Typo]:
    """Check one fragment and return typos with offsets local to it.

    Fragments that are too short, or whose language cannot be detected among
    the enabled ones, yield nothing. A failing grammar engine also yields
    nothing; AnalysisCancelled always propagates.
    """
    if len(fragment) < snapshot.min_fragment_chars:
        return frozenset()

    language = collaborators.detector.detect(fragment, snapshot.enabled_languages)
    if language is None:
        logger.debug("No language detected for fragment of %d chars", len(fragment))
        return frozenset()

    engine = collaborators.engines.get(language)
    if engine is None:
        logger.debug("No grammar engine registered for %s", language)
        return frozenset()

    outcome = run_engine(lambda: engine.check(fragment, language))
    if outcome.status is OutcomeStatus.TOOL_FAILURE:
        logger.warning(
            "Grammar engine failed on fragment of %d chars (%s): %s",
            len(fragment),
            language,
            outcome.error,
        )
    matches = outcome.matches()
    collaborators.checkpoint.poll()

    # dict keeps first-seen order while dropping repeated matches
    typos = list(dict.fromkeys(Typo.from_match(m, language) for m in matches))
    other = [t for t in typos if not t.is_spelling]
    if not snapshot.enabled_spellcheck:
        return frozenset(other)

    verified = [
        t
        for t in typos
        if t.is_spelling
        and _confirmed_by_dictionary(t, fragment, language, collaborators.spellchecker)
    ]
    return frozenset(other + verified)


def _confirmed_by_dictionary(
    typo: Typo, fragment: str, language: Language, spellchecker: Spellchecker
) -> bool:
    """English spelling matches must contain a word the dictionary rejects."""
    if not language.is_english:
        return True
    words: List[str] = typo.range.slice(fragment).split()
    return any(spellchecker.check(word) for word in words)
