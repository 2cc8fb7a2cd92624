from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

from .cancellation import CancellationCheckpoint, NeverCancelled
from .detectors import LanguageDetector, create_detector
from .engines import GrammarEngine, create_engines
from .language import Language
from .spellcheckers import Spellchecker, create_spellchecker

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import GrammarCheckerConfig


@dataclass(frozen=True, slots=True)
class Collaborators:
    """External services a check calls into.

    ``engines`` maps each language to the grammar engine that handles it.
    """

    detector: LanguageDetector
    engines: Mapping[Language, GrammarEngine]
    spellchecker: Spellchecker
    checkpoint: CancellationCheckpoint = field(default_factory=NeverCancelled)

    def with_checkpoint(self, checkpoint: CancellationCheckpoint) -> "Collaborators":
        return Collaborators(
            detector=self.detector,
            engines=self.engines,
            spellchecker=self.spellchecker,
            checkpoint=checkpoint,
        )


def build_collaborators_from_config(config: "GrammarCheckerConfig") -> Collaborators:
    """Convenience helper to build every collaborator from GrammarCheckerConfig."""
    languages = config.languages()
    default_language = (
        Language.from_code(config.enabled_languages[0])
        if config.enabled_languages
        else Language.ENGLISH
    )
    detector = create_detector(
        config.detector_name, language=default_language, settings=config.lingua
    )
    if config.spellchecker_name.lower().strip() in {"dictionary", "wordlist"}:
        if not config.dictionary_path:
            raise ValueError("dictionary_path is required for the dictionary spellchecker.")
        spellchecker = create_spellchecker(
            config.spellchecker_name, path=config.dictionary_path
        )
    else:
        spellchecker = create_spellchecker(config.spellchecker_name)
    engines = create_engines(
        config.engine_name,
        languages,
        settings=config.languagetool,
        spellchecker=spellchecker,
    )
    return Collaborators(detector=detector, engines=engines, spellchecker=spellchecker)
