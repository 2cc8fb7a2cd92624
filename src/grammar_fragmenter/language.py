from __future__ import annotations

from enum import Enum


class Language(Enum):
    """Languages the checker can be configured for.

    Each member carries its ISO 639-1 code, the LanguageTool language code and
    an English display name.
    """

    ENGLISH = ("en", "en-US", "English")
    BRITISH_ENGLISH = ("en-gb", "en-GB", "British English")
    GERMAN = ("de", "de-DE", "German")
    FRENCH = ("fr", "fr", "French")
    SPANISH = ("es", "es", "Spanish")
    ITALIAN = ("it", "it", "Italian")
    PORTUGUESE = ("pt", "pt-PT", "Portuguese")
    DUTCH = ("nl", "nl", "Dutch")
    POLISH = ("pl", "pl-PL", "Polish")
    RUSSIAN = ("ru", "ru-RU", "Russian")
    UKRAINIAN = ("uk", "uk-UA", "Ukrainian")
    CHINESE = ("zh", "zh-CN", "Chinese")
    JAPANESE = ("ja", "ja-JP", "Japanese")
    PERSIAN = ("fa", "fa", "Persian")
    GREEK = ("el", "el-GR", "Greek")

    def __init__(self, iso_code: str, tool_code: str, display_name: str) -> None:
        self.iso_code = iso_code
        self.tool_code = tool_code
        self.display_name = display_name

    @property
    def is_english(self) -> bool:
        return self in (Language.ENGLISH, Language.BRITISH_ENGLISH)

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Resolve an ISO code, LanguageTool code or English name to a Language."""
        normalized = code.strip().lower().replace("_", "-")
        for language in cls:
            candidates = {
                language.iso_code,
                language.tool_code.lower(),
                language.display_name.lower(),
                language.name.lower(),
            }
            if normalized in candidates:
                return language
        raise ValueError(f"Unknown language '{code}'.")

    def __str__(self) -> str:
        return self.iso_code
