from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Dict, List

from ..config import LanguageToolSettings
from ..errors import ToolFailure
from ..language import Language
from ..models import RawMatch, RuleInfo, TextRange
from .base import GrammarEngine

logger = logging.getLogger(__name__)

language_tool_python: Any | None = None

SPELLING_RULE_PREFIXES = ("MORFOLOGIK_RULE", "HUNSPELL")
SPELLING_RULE_SUFFIX = "_SPELLER_RULE"


class LanguageToolEngine(GrammarEngine):
    """
    Grammar engine backed by language_tool_python. One LanguageTool instance
    is created per language on first use and reused afterwards; all enabled
    languages can share a single engine.
    """

    def __init__(self, settings: LanguageToolSettings | None = None) -> None:
        self._settings = settings or LanguageToolSettings()
        self._module = _load_language_tool()
        self._tools: Dict[Language, Any] = {}
        self._lock = threading.Lock()

    def check(self, text: str, language: Language) -> List[RawMatch]:
        tool = self._tool_for(language)
        try:
            matches = tool.check(text)
        except Exception as exc:
            raise ToolFailure(
                f"LanguageTool failed to check {len(text)} chars as {language.tool_code}."
            ) from exc
        return [_to_raw_match(match, len(text)) for match in matches]

    def close(self) -> None:
        """Shut down every LanguageTool server this engine started."""
        with self._lock:
            tools, self._tools = list(self._tools.values()), {}
        for tool in tools:
            tool.close()

    def _tool_for(self, language: Language) -> Any:
        with self._lock:
            tool = self._tools.get(language)
            if tool is not None:
                return tool
            logger.info("Starting LanguageTool for %s", language.tool_code)
            try:
                tool = self._module.LanguageTool(
                    language.tool_code,
                    mother_tongue=self._settings.mother_tongue,
                    remote_server=self._settings.remote_server,
                )
            except Exception as exc:
                raise ToolFailure(
                    f"Could not start LanguageTool for {language.tool_code}."
                ) from exc
            if self._settings.disabled_rules:
                tool.disabled_rules.update(self._settings.disabled_rules)
            self._tools[language] = tool
            return tool


def is_spelling_rule(rule_id: str) -> bool:
    """Dictionary lookups are the morfologik, hunspell and speller rules.

    The "misspelling" issue type is not used here: LanguageTool also gives it
    to compound and contraction rules that never consult a dictionary.
    """
    return rule_id.startswith(SPELLING_RULE_PREFIXES) or rule_id.endswith(
        SPELLING_RULE_SUFFIX
    )


def _to_raw_match(match: Any, text_length: int) -> RawMatch:
    rule_id = str(getattr(match, "ruleId", "") or getattr(match, "rule_id", ""))
    offset = int(match.offset)
    length = getattr(match, "errorLength", None)
    if length is None:
        length = getattr(match, "error_length", 0)
    start = min(max(0, offset), text_length)
    end = min(start + max(0, int(length)), text_length)
    return RawMatch(
        range=TextRange(start, end),
        rule=RuleInfo(
            rule_id=rule_id,
            is_dictionary_based_spelling_rule=is_spelling_rule(rule_id),
            category=str(getattr(match, "category", "") or ""),
            message=str(getattr(match, "message", "") or ""),
        ),
        suggestions=tuple(getattr(match, "replacements", None) or ()),
    )


def _load_language_tool() -> Any:
    """Import language_tool_python lazily so it stays an optional dependency."""
    global language_tool_python
    if language_tool_python is not None:
        return language_tool_python
    try:  # pragma: no cover - import guard
        language_tool_python = importlib.import_module("language_tool_python")
    except Exception as exc:  # pragma: no cover - handled at runtime
        raise RuntimeError(
            "language-tool-python is not installed. Install extras via 'pip install .[languagetool]'."
        ) from exc
    return language_tool_python
