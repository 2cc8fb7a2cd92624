from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .models import RawMatch


class GrammarCheckError(RuntimeError):
    """Base class for errors raised while checking text."""


class ToolFailure(GrammarCheckError):
    """Raised by a grammar backend that could not check a fragment."""


class AnalysisCancelled(GrammarCheckError):
    """Raised at a cancellation checkpoint once the surrounding check was cancelled."""


class OutcomeStatus(Enum):
    SUCCESS = "success"
    TOOL_FAILURE = "tool_failure"
    ABORTED = "aborted"


@dataclass(slots=True)
class EngineOutcome:
    """Result of one grammar-engine invocation.

    ``matches()`` yields the engine matches on success, an empty list for a
    recoverable tool failure, and re-raises the abort signal when aborted.
    """

    status: OutcomeStatus
    raw_matches: list[RawMatch] = field(default_factory=list)
    error: BaseException | None = None

    def matches(self) -> list[RawMatch]:
        if self.status is OutcomeStatus.ABORTED:
            if not isinstance(self.error, AnalysisCancelled):
                raise TypeError("An aborted outcome must carry AnalysisCancelled.")
            raise self.error
        if self.status is OutcomeStatus.TOOL_FAILURE:
            return []
        return self.raw_matches


def run_engine(call: Callable[[], list[RawMatch]]) -> EngineOutcome:
    """Invoke ``call`` and classify what happened into an EngineOutcome."""
    try:
        raw = call()
    except AnalysisCancelled as exc:
        return EngineOutcome(OutcomeStatus.ABORTED, error=exc)
    except Exception as exc:
        return EngineOutcome(OutcomeStatus.TOOL_FAILURE, error=exc)
    return EngineOutcome(
        OutcomeStatus.SUCCESS, raw_matches=[m for m in raw or [] if m is not None]
    )
