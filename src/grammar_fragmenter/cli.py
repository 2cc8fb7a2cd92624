from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .cancellation import DeadlineCheckpoint
from .collaborators import build_collaborators_from_config
from .config import GrammarCheckerConfig, StaticConfigProvider, load_config
from .models import Document, DocumentReport, Typo
from .pipeline import GrammarChecker, check_document

app = typer.Typer(help="Fragment-based grammar checker CLI.", no_args_is_help=True)


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    languages: List[str] | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Enabled language code; repeat for several (e.g. -l en -l de).",
    ),
    spellcheck: bool | None = typer.Option(
        None,
        "--spellcheck/--no-spellcheck",
        help="Override config enabled_spellcheck flag.",
    ),
    max_fragment_chars: int | None = typer.Option(
        None, "--max-fragment-chars", help="Largest fragment sent to the grammar engine."
    ),
    detector_name: str | None = typer.Option(
        None, "--detector", help="Language detector to use ('fixed' or 'lingua')."
    ),
    engine_name: str | None = typer.Option(
        None,
        "--engine",
        help="Grammar engine to use ('null', 'spelling' or 'languagetool').",
    ),
    spellchecker_name: str | None = typer.Option(
        None,
        "--spellchecker",
        help="Spellchecker to use ('null', 'dictionary' or 'pyspellchecker').",
    ),
    dictionary_path: Path | None = typer.Option(
        None, "--dictionary-path", help="Word list for the 'dictionary' spellchecker."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Cancel each document's check after this many seconds."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Check the input documents and emit a JSON report of typos."""
    logging.basicConfig(
        level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )
    cfg = load_config(config)
    _apply_overrides(
        cfg,
        languages,
        spellcheck,
        max_fragment_chars,
        detector_name,
        engine_name,
        spellchecker_name,
        dictionary_path,
    )
    try:
        collaborators = build_collaborators_from_config(cfg)
        provider = StaticConfigProvider(cfg)
    except (ValueError, RuntimeError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    checker = GrammarChecker(collaborators, provider)
    documents = _load_documents(input_path)

    reports: Dict[str, DocumentReport] = {}
    for document in documents:
        # Every document gets its own time budget.
        checkpoint = DeadlineCheckpoint(timeout) if timeout is not None else None
        reports[document.doc_id] = check_document(document, checker, checkpoint)

    texts = {doc.doc_id: doc.text for doc in documents}
    summary = [
        _report_dict(report, texts[doc_id]) for doc_id, report in sorted(reports.items())
    ]
    typer.echo(json.dumps({"documents": summary}, indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = GrammarCheckerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: GrammarCheckerConfig,
    languages: List[str] | None,
    spellcheck: bool | None,
    max_fragment_chars: int | None,
    detector_name: str | None,
    engine_name: str | None,
    spellchecker_name: str | None,
    dictionary_path: Path | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if languages:
        config.enabled_languages = list(languages)
    if spellcheck is not None:
        config.enabled_spellcheck = spellcheck
    if max_fragment_chars is not None:
        config.max_fragment_chars = max_fragment_chars
    if detector_name:
        config.detector_name = detector_name
    if engine_name:
        config.engine_name = engine_name
    if spellchecker_name:
        config.spellchecker_name = spellchecker_name
    if dictionary_path:
        config.dictionary_path = str(dictionary_path)


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


class TypoPayload(TypedDict):
    start: int
    end: int
    text: str
    rule_id: str
    category: str
    spelling: bool
    fixes: List[str]
    language: str


class DocumentSummary(TypedDict):
    doc_id: str
    cancelled: bool
    typos: List[TypoPayload]


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


def _report_dict(report: DocumentReport, text: str) -> DocumentSummary:
    return {
        "doc_id": report.doc_id,
        "cancelled": report.cancelled,
        "typos": [_typo_dict(typo, text) for typo in report.typos],
    }


def _typo_dict(typo: Typo, text: str) -> TypoPayload:
    """Serialize a Typo so it can be emitted in JSON."""
    return {
        "start": typo.range.start,
        "end": typo.range.end,
        "text": typo.range.slice(text),
        "rule_id": typo.info.rule_id,
        "category": typo.info.category,
        "spelling": typo.is_spelling,
        "fixes": list(typo.fixes),
        "language": typo.language.iso_code,
    }


if __name__ == "__main__":
    main()
