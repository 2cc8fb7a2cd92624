import pytest

from grammar_fragmenter.errors import AnalysisCancelled
from grammar_fragmenter.language import Language
from grammar_fragmenter.segmenter import analyze
from grammar_fragmenter.spellcheckers import SPELLING_RULE
from tests.utils import GRAMMAR, SPELLING, ScriptedEngine, make_collaborators, make_snapshot


def _spans(typos, text):
    return sorted((t.range.start, t.range.end, text[t.range.start : t.range.end]) for t in typos)


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t\r\n "])
def test_blank_input_has_no_typos(text: str):
    """Blank text is not checked at all."""
    engine = ScriptedEngine({"Helo": SPELLING})
    assert analyze(text, make_snapshot(), make_collaborators(engine)) == frozenset()
    assert engine.calls == []


def test_example_offsets_are_global():
    """Typos found in later fragments are shifted back into original-text offsets."""
    text = "Helo world. This is fine."
    engine = ScriptedEngine({"Helo": SPELLING, "This": GRAMMAR})
    typos = analyze(text, make_snapshot(max_fragment_chars=15), make_collaborators(engine))

    assert _spans(typos, text) == [(0, 4, "Helo"), (12, 16, "This")]
    assert engine.calls == ["Helo world", " This is fine"]


def test_small_text_is_checked_in_one_piece():
    text = "Helo world. This is fine."
    engine = ScriptedEngine({"Helo": SPELLING, "This": GRAMMAR})
    typos = analyze(text, make_snapshot(), make_collaborators(engine))

    assert _spans(typos, text) == [(0, 4, "Helo"), (12, 16, "This")]
    assert engine.calls == [text]


def test_short_input_only_gets_spellchecked():
    """Fewer than three words skips the grammar engine and keeps spelling typos only."""
    text = "Helo wrld"
    engine = ScriptedEngine({"Helo": GRAMMAR})
    typos = analyze(text, make_snapshot(), make_collaborators(engine))

    assert engine.calls == []
    assert _spans(typos, text) == [(0, 4, "Helo"), (5, 9, "wrld")]
    assert all(t.info == SPELLING_RULE and t.is_spelling for t in typos)


def test_short_input_respects_disabled_spellcheck():
    engine = ScriptedEngine()
    typos = analyze(
        "Helo wrld", make_snapshot(enabled_spellcheck=False), make_collaborators(engine)
    )
    assert typos == frozenset()


def test_oversized_text_without_separators_is_checked_once():
    """With separators exhausted the oversized text goes to the engine as-is."""
    text = "alpha beta gamma delta epsilon"
    engine = ScriptedEngine()
    analyze(
        text,
        make_snapshot(max_fragment_chars=5),
        make_collaborators(engine),
        separators=("\n", "."),
    )
    assert engine.calls == [text]


def test_empty_separator_list_checks_whole_text():
    text = "Helo world and more"
    engine = ScriptedEngine({"Helo": SPELLING})
    typos = analyze(text, make_snapshot(max_fragment_chars=3), make_collaborators(engine), separators=())

    assert engine.calls == [text]
    assert _spans(typos, text) == [(0, 4, "Helo")]


def test_ranges_stay_inside_long_text():
    """Deep recursion over a long text keeps every range within the original text."""
    sentence = "Helo world, the cat sat on the mat; Ths is fine.\n"
    text = sentence * 40
    engine = ScriptedEngine({"Helo": SPELLING, "Ths": SPELLING, "cat": GRAMMAR})
    typos = analyze(text, make_snapshot(max_fragment_chars=20), make_collaborators(engine))

    assert len(typos) == 40 * 3
    for typo in typos:
        assert 0 <= typo.range.start <= typo.range.end <= len(text)
        assert text[typo.range.start : typo.range.end] in {"Helo", "Ths", "cat"}
    assert all(len(call) <= 20 for call in engine.calls)


def test_identical_typos_in_different_fragments_stay_distinct():
    text = "Helo world.\nHelo world."
    engine = ScriptedEngine({"Helo": SPELLING})
    typos = analyze(text, make_snapshot(max_fragment_chars=12), make_collaborators(engine))

    assert _spans(typos, text) == [(0, 4, "Helo"), (12, 16, "Helo")]


def test_duplicate_matches_collapse():
    text = "Helo world and friends"
    engine = ScriptedEngine({"Helo": SPELLING}, duplicate=True)
    typos = analyze(text, make_snapshot(), make_collaborators(engine))
    assert len(typos) == 1


def test_disabled_spellcheck_drops_spelling_typos_everywhere():
    text = "Helo world. This is fine."
    engine = ScriptedEngine({"Helo": SPELLING, "This": GRAMMAR})
    typos = analyze(
        text,
        make_snapshot(max_fragment_chars=15, enabled_spellcheck=False),
        make_collaborators(engine),
    )
    assert _spans(typos, text) == [(12, 16, "This")]
    assert not any(t.is_spelling for t in typos)


def test_tool_failure_in_one_fragment_spares_siblings():
    text = "Helo world. broken sentence here. This is fine."
    engine = ScriptedEngine({"Helo": SPELLING, "This": GRAMMAR}, fail_when="broken")
    typos = analyze(text, make_snapshot(max_fragment_chars=30), make_collaborators(engine))

    assert _spans(typos, text) == [(0, 4, "Helo"), (34, 38, "This")]
    assert len(engine.calls) == 3


def test_abort_unwinds_whole_recursion():
    """An abort raised by the engine is never treated as a tool failure."""

    def abort_on_second(fragment: str) -> None:
        if "second" in fragment:
            raise AnalysisCancelled("stop")

    text = "Helo world. A second part. A third part."
    engine = ScriptedEngine({"Helo": SPELLING}, on_call=abort_on_second)
    with pytest.raises(AnalysisCancelled):
        analyze(text, make_snapshot(max_fragment_chars=15), make_collaborators(engine))


def test_typos_carry_detected_language():
    text = "Das Haus ist schoen."
    engine = ScriptedEngine({"schoen": SPELLING})
    typos = analyze(
        text,
        make_snapshot(enabled_languages=frozenset({Language.GERMAN})),
        make_collaborators(engine, language=Language.GERMAN),
    )
    assert [t.language for t in typos] == [Language.GERMAN]
