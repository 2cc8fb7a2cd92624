"""Minimal example showing how to check a long text with LanguageTool and lingua."""

from __future__ import annotations

import logging
from pathlib import Path

from grammar_fragmenter import GrammarChecker, StaticConfigProvider, load_config
from grammar_fragmenter.collaborators import build_collaborators_from_config


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = load_config(Path(__file__).with_name("example_config.yaml"))
    collaborators = build_collaborators_from_config(config)
    checker = GrammarChecker(collaborators, StaticConfigProvider(config))

    sample_text = (
        "Helo world. This are a sentence with a error in it.\n"
        "Der Hund spielt im Garten, aber die Katze schlaeft.\n"
    ) * 3
    for typo in checker.check(sample_text):
        flagged = sample_text[typo.range.start : typo.range.end]
        print(
            f"[{typo.range.start:>4}, {typo.range.end:>4}) {typo.language} "
            f"{typo.info.rule_id}: {flagged!r} -> {list(typo.fixes)[:3]}"
        )


if __name__ == "__main__":
    main()
