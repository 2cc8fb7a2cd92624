from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod

from .errors import AnalysisCancelled


class CancellationCheckpoint(ABC):
    """Cooperative cancellation hook polled by long-running checks."""

    @abstractmethod
    def poll(self) -> None:
        """Raise AnalysisCancelled if the surrounding operation was cancelled."""
        raise NotImplementedError


class NeverCancelled(CancellationCheckpoint):
    """Checkpoint that never aborts."""

    def poll(self) -> None:
        return None


class CancellationToken(CancellationCheckpoint):
    """Checkpoint that aborts once ``cancel()`` has been called from any thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def poll(self) -> None:
        if self._event.is_set():
            raise AnalysisCancelled("Grammar check was cancelled.")


class DeadlineCheckpoint(CancellationCheckpoint):
    """Checkpoint that aborts once ``seconds`` have elapsed since construction."""

    def __init__(self, seconds: float, clock=time.monotonic) -> None:
        self._clock = clock
        self._deadline = clock() + max(0.0, seconds)

    def poll(self) -> None:
        if self._clock() >= self._deadline:
            raise AnalysisCancelled("Grammar check exceeded its time budget.")
