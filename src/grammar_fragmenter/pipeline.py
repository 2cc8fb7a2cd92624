from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .cancellation import CancellationCheckpoint
from .collaborators import Collaborators
from .config import ConfigProvider, StaticConfigProvider
from .errors import AnalysisCancelled
from .models import Document, DocumentReport, Typo, sorted_typos
from .segmenter import analyze

logger = logging.getLogger(__name__)


class GrammarChecker:
    """Checks whole texts with the injected collaborators.

    Each call to ``check`` reads one configuration snapshot and uses it for
    every fragment, so settings changed mid-check do not leak into it.
    """

    def __init__(
        self,
        collaborators: Collaborators,
        config_provider: ConfigProvider | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._config_provider = config_provider or StaticConfigProvider()

    def check(
        self,
        text: str,
        *,
        separators: Sequence[str] | None = None,
        checkpoint: CancellationCheckpoint | None = None,
    ) -> List[Typo]:
        """Return typos ordered by position. Raises AnalysisCancelled on abort."""
        snapshot = self._config_provider.snapshot()
        collaborators = self._collaborators
        if checkpoint is not None:
            collaborators = collaborators.with_checkpoint(checkpoint)
        return sorted_typos(analyze(text, snapshot, collaborators, separators))


def check_document(
    doc: Document,
    checker: GrammarChecker,
    checkpoint: CancellationCheckpoint | None = None,
) -> DocumentReport:
    """Check a single document; a cancelled check is reported, not raised."""
    try:
        typos = checker.check(doc.text, checkpoint=checkpoint)
    except AnalysisCancelled:
        logger.info("Check of %s was cancelled", doc.doc_id)
        return DocumentReport(doc_id=doc.doc_id, typos=[], cancelled=True)
    logger.debug("Found %d typos in %s", len(typos), doc.doc_id)
    return DocumentReport(doc_id=doc.doc_id, typos=typos)


def check_corpus(
    documents: List[Document],
    checker: GrammarChecker,
    checkpoint: CancellationCheckpoint | None = None,
) -> Dict[str, DocumentReport]:
    """Check all documents and return the per-document reports."""
    results: Dict[str, DocumentReport] = {}
    for document in documents:
        results[document.doc_id] = check_document(document, checker, checkpoint)
    return results
