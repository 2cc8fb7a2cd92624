from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .language import Language
from .segmentation import DEFAULT_SEPARATORS


@dataclass(slots=True)
class LanguageToolSettings:
    """Configuration block for the LanguageTool grammar engine."""

    remote_server: str | None = None
    mother_tongue: str | None = None
    disabled_rules: List[str] = field(default_factory=list)


@dataclass(slots=True)
class LinguaSettings:
    """Configuration block for the lingua language detector."""

    minimum_relative_distance: float = 0.0
    low_accuracy: bool = False


@dataclass(frozen=True, slots=True)
class ConfigSnapshot:
    """Immutable view of the settings a single check runs with."""

    enabled_languages: frozenset[Language] = frozenset({Language.ENGLISH})
    enabled_spellcheck: bool = True
    max_fragment_chars: int = 10_000
    min_fragment_chars: int = 2
    min_words: int = 3
    separators: tuple[str, ...] = DEFAULT_SEPARATORS

    def __post_init__(self) -> None:
        if self.max_fragment_chars < 1:
            raise ValueError("max_fragment_chars must be at least 1.")
        if self.min_fragment_chars < 0:
            raise ValueError("min_fragment_chars must not be negative.")
        if self.min_words < 0:
            raise ValueError("min_words must not be negative.")
        if any(len(sep) != 1 for sep in self.separators):
            raise ValueError("separators must be single characters.")


@dataclass(slots=True)
class GrammarCheckerConfig:
    """Configuration options for the grammar checker."""

    enabled_languages: List[str] = field(default_factory=lambda: ["en"])
    enabled_spellcheck: bool = True
    max_fragment_chars: int = 10_000
    min_fragment_chars: int = 2
    min_words: int = 3
    separators: List[str] = field(default_factory=lambda: list(DEFAULT_SEPARATORS))
    detector_name: str = "fixed"
    engine_name: str = "null"
    spellchecker_name: str = "null"
    dictionary_path: str | None = None
    languagetool: LanguageToolSettings = field(default_factory=LanguageToolSettings)
    lingua: LinguaSettings = field(default_factory=LinguaSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def languages(self) -> frozenset[Language]:
        return frozenset(Language.from_code(code) for code in self.enabled_languages)

    def snapshot(self) -> ConfigSnapshot:
        """Freeze the settings that a single check must see consistently."""
        return ConfigSnapshot(
            enabled_languages=self.languages(),
            enabled_spellcheck=self.enabled_spellcheck,
            max_fragment_chars=self.max_fragment_chars,
            min_fragment_chars=self.min_fragment_chars,
            min_words=self.min_words,
            separators=tuple(self.separators),
        )


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(GrammarCheckerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "languagetool" in data:
        kwargs["languagetool"] = _build_block(LanguageToolSettings, data["languagetool"])
    if "lingua" in data:
        kwargs["lingua"] = _build_block(LinguaSettings, data["lingua"])
    return kwargs


def _build_block(cls: Any, value: Any) -> Any:
    if isinstance(value, cls):
        return value
    if not isinstance(value, Mapping):
        raise ValueError(f"Configuration block for {cls.__name__} must be a mapping.")
    allowed = {field.name for field in fields(cls)}
    return cls(**{key: value[key] for key in value if key in allowed})


def config_from_dict(data: Mapping[str, Any] | None) -> GrammarCheckerConfig:
    """Build a GrammarCheckerConfig from a dictionary-like input."""
    if data is None:
        return GrammarCheckerConfig()
    return GrammarCheckerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> GrammarCheckerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> GrammarCheckerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return GrammarCheckerConfig()
    return config_from_yaml(path)


class ConfigProvider(ABC):
    """Source of configuration snapshots."""

    @abstractmethod
    def snapshot(self) -> ConfigSnapshot:
        raise NotImplementedError


class StaticConfigProvider(ConfigProvider):
    """Serves snapshots of a config that is not expected to change."""

    def __init__(self, config: GrammarCheckerConfig | None = None) -> None:
        self._snapshot = (config or GrammarCheckerConfig()).snapshot()

    def snapshot(self) -> ConfigSnapshot:
        return self._snapshot


class MutableConfigProvider(ConfigProvider):
    """Holds settings that may be changed while checks are running."""

    def __init__(self, config: GrammarCheckerConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._config = config_from_dict((config or GrammarCheckerConfig()).to_dict())

    def update(self, **changes: Any) -> None:
        """Replace settings atomically; running checks keep their snapshot."""
        with self._lock:
            self._config = replace(self._config, **changes)

    def snapshot(self) -> ConfigSnapshot:
        with self._lock:
            return self._config.snapshot()
