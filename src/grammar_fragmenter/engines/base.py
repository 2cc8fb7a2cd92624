from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..language import Language
from ..models import RawMatch


class GrammarEngine(ABC):
    """Abstract grammar checker that reports rule matches for a text."""

    @abstractmethod
    def check(self, text: str, language: Language) -> List[RawMatch]:
        """Return matches with offsets local to ``text``.

        Backend problems are raised as ToolFailure.
        """
        raise NotImplementedError
