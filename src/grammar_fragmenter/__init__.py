"""
grammar_fragmenter package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analyzer import analyze_fragment
from .cancellation import CancellationToken, DeadlineCheckpoint, NeverCancelled
from .collaborators import Collaborators, build_collaborators_from_config
from .config import (
    ConfigSnapshot,
    GrammarCheckerConfig,
    MutableConfigProvider,
    StaticConfigProvider,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .errors import AnalysisCancelled, ToolFailure
from .language import Language
from .models import Typo
from .pipeline import GrammarChecker, check_corpus, check_document
from .segmenter import analyze

__all__ = [
    "AnalysisCancelled",
    "CancellationToken",
    "Collaborators",
    "ConfigSnapshot",
    "DeadlineCheckpoint",
    "GrammarChecker",
    "GrammarCheckerConfig",
    "Language",
    "MutableConfigProvider",
    "NeverCancelled",
    "StaticConfigProvider",
    "ToolFailure",
    "Typo",
    "analyze",
    "analyze_fragment",
    "build_collaborators_from_config",
    "check_corpus",
    "check_document",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
]

__version__ = "0.1.0"
