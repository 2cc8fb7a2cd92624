import threading

import pytest

from grammar_fragmenter.cancellation import CancellationToken, DeadlineCheckpoint, NeverCancelled
from grammar_fragmenter.config import (
    ConfigProvider,
    GrammarCheckerConfig,
    MutableConfigProvider,
    StaticConfigProvider,
)
from grammar_fragmenter.errors import AnalysisCancelled
from grammar_fragmenter.models import Document
from grammar_fragmenter.pipeline import GrammarChecker, check_corpus, check_document
from tests.utils import GRAMMAR, SPELLING, ScriptedEngine, make_collaborators


class CountingProvider(ConfigProvider):
    def __init__(self, config: GrammarCheckerConfig) -> None:
        self._inner = StaticConfigProvider(config)
        self.reads = 0

    def snapshot(self):
        self.reads += 1
        return self._inner.snapshot()


def test_check_reads_config_once_per_call():
    provider = CountingProvider(GrammarCheckerConfig(max_fragment_chars=15))
    checker = GrammarChecker(make_collaborators(ScriptedEngine()), provider)

    checker.check("Helo world. This is fine. And a third part.")
    assert provider.reads == 1
    checker.check("Another short text here.")
    assert provider.reads == 2


def test_settings_changed_mid_check_do_not_apply():
    """A check keeps the snapshot it started with even if settings change meanwhile."""
    provider = MutableConfigProvider(GrammarCheckerConfig(max_fragment_chars=15))

    def disable_spellcheck(_: str) -> None:
        provider.update(enabled_spellcheck=False)

    engine = ScriptedEngine({"Helo": SPELLING, "Ths": SPELLING}, on_call=disable_spellcheck)
    checker = GrammarChecker(make_collaborators(engine), provider)
    text = "Helo world. Ths is fine."
    typos = checker.check(text)

    assert [text[t.range.start : t.range.end] for t in typos] == ["Helo", "Ths"]
    assert checker.check(text) == []


def test_check_returns_typos_in_order():
    checker = GrammarChecker(
        make_collaborators(ScriptedEngine({"This": GRAMMAR, "Helo": SPELLING})),
        StaticConfigProvider(GrammarCheckerConfig(max_fragment_chars=15)),
    )
    typos = checker.check("Helo world. This is fine. Helo again friend.")
    assert [t.range.start for t in typos] == [0, 12, 26]


def test_cancelled_check_raises_instead_of_returning_partial_result():
    token = CancellationToken()

    def cancel_on_second(fragment: str) -> None:
        if "second" in fragment:
            token.cancel()

    engine = ScriptedEngine({"Helo": SPELLING}, on_call=cancel_on_second)
    checker = GrammarChecker(
        make_collaborators(engine),
        StaticConfigProvider(GrammarCheckerConfig(max_fragment_chars=15)),
    )
    with pytest.raises(AnalysisCancelled):
        checker.check("Helo world. A second part. A third part.", checkpoint=token)
    assert token.is_cancelled
    assert engine.calls == ["Helo world", " A second part"]


def test_check_document_marks_cancelled_reports():
    """A cancelled report is distinguishable from one that found nothing."""
    token = CancellationToken()
    token.cancel()
    checker = GrammarChecker(make_collaborators(ScriptedEngine()))

    cancelled = check_document(Document("a", "Perfectly fine text here."), checker, token)
    clean = check_document(Document("b", "Perfectly fine text here."), checker)

    assert cancelled.cancelled and cancelled.typos == []
    assert not clean.cancelled and clean.typos == []


def test_deadline_checkpoint_cancels_after_budget():
    now = [100.0]
    checkpoint = DeadlineCheckpoint(5.0, clock=lambda: now[0])
    checkpoint.poll()
    now[0] = 105.0
    with pytest.raises(AnalysisCancelled):
        checkpoint.poll()
    NeverCancelled().poll()


def test_check_corpus_reports_each_document():
    checker = GrammarChecker(make_collaborators(ScriptedEngine({"Helo": SPELLING})))
    results = check_corpus(
        [Document("one", "Helo there my friend."), Document("two", "All good here.")],
        checker,
    )
    assert sorted(results) == ["one", "two"]
    assert len(results["one"].typos) == 1
    assert results["two"].typos == []


def test_concurrent_checks_share_nothing():
    checker = GrammarChecker(
        make_collaborators(ScriptedEngine({"Helo": SPELLING})),
        StaticConfigProvider(GrammarCheckerConfig(max_fragment_chars=15)),
    )
    text = "Helo world. " * 50
    results: list[int] = []

    def worker() -> None:
        results.append(len(checker.check(text)))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == [50, 50, 50, 50]
