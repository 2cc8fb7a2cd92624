from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Collection, Dict, FrozenSet

from ..config import LinguaSettings
from ..language import Language
from .base import LanguageDetector

logger = logging.getLogger(__name__)

lingua: Any | None = None

# lingua has a single English model.
LINGUA_NAMES = {Language.BRITISH_ENGLISH: "ENGLISH"}


class LinguaLanguageDetector(LanguageDetector):
    """Detector backed by lingua-language-detector, restricted to the allowed languages."""

    def __init__(self, settings: LinguaSettings | None = None) -> None:
        self._settings = settings or LinguaSettings()
        self._module = _load_lingua()
        self._detectors: Dict[FrozenSet[str], Any] = {}
        self._lock = threading.Lock()

    def detect(self, text: str, allowed: Collection[Language]) -> Language | None:
        by_name: Dict[str, Language] = {}
        for language in sorted(allowed, key=lambda lang: lang.iso_code):
            by_name.setdefault(_lingua_name(language), language)
        if not by_name:
            return None
        detector = self._detector_for(frozenset(by_name))
        detected = detector.detect_language_of(text)
        if detected is None:
            logger.debug("lingua could not decide on a language for %r", text[:40])
            return None
        return by_name.get(detected.name)

    def _detector_for(self, names: FrozenSet[str]) -> Any:
        with self._lock:
            detector = self._detectors.get(names)
            if detector is None:
                detector = self._build(names)
                self._detectors[names] = detector
            return detector

    def _build(self, names: FrozenSet[str]) -> Any:
        builder_cls = self._module.LanguageDetectorBuilder
        languages = [getattr(self._module.Language, name) for name in sorted(names)]
        # lingua needs at least two candidates; with one, detect among all
        # languages and keep the answer only when it is the allowed one.
        if len(languages) >= 2:
            builder = builder_cls.from_languages(*languages)
        else:
            builder = builder_cls.from_all_languages()
        if self._settings.minimum_relative_distance > 0:
            builder = builder.with_minimum_relative_distance(
                self._settings.minimum_relative_distance
            )
        if self._settings.low_accuracy:
            builder = builder.with_low_accuracy_mode()
        logger.debug("Built lingua detector for %s", ", ".join(sorted(names)))
        return builder.build()


def _lingua_name(language: Language) -> str:
    return LINGUA_NAMES.get(language, language.name)


def _load_lingua() -> Any:
    """Import lingua lazily so it stays an optional dependency."""
    global lingua
    if lingua is not None:
        return lingua
    try:  # pragma: no cover - import guard
        lingua = importlib.import_module("lingua")
    except Exception as exc:  # pragma: no cover - handled at runtime
        raise RuntimeError(
            "lingua-language-detector is not installed. Install extras via 'pip install .[lingua]'."
        ) from exc
    return lingua
