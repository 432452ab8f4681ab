"""
Batch ingestion.

Every source is parsed, validated and inserted in order. Failures are
collected into the report; a bad document never stops the batch.
"""

from dataclasses import replace
from typing import Iterable, List

from folio.config.models import SourceConfig
from folio.documents.store import DocumentStore
from folio.documents.types import Rejected
from folio.documents.validation import evaluate
from folio.exceptions import DuplicateSlug
from folio.ingestion.loader import load_sources
from folio.ingestion.types import IngestReport, Source
from folio.utils import get_logger

logger = get_logger(__name__)


def ingest(sources: Iterable[Source]) -> IngestReport:
    """
    Load sources into a new, sealed store.

    Args:
        sources: Raw documents, in priority order. When two share a slug the
            first one wins.

    Returns:
        The report holding the store and every rejection.
    """
    store = DocumentStore()
    rejected: List[Rejected] = []
    accepted = 0

    for source in sources:
        outcome = evaluate(source.text, source.identifier)
        if isinstance(outcome, Rejected):
            _log_rejection(outcome)
            rejected.append(outcome)
            continue

        try:
            store.insert(outcome.document)
        except DuplicateSlug as e:
            failure = Rejected(source.identifier, e)
            _log_rejection(failure)
            rejected.append(failure)
            continue
        accepted += 1

    store.seal()
    logger.info(
        "ingest_completed",
        accepted=accepted,
        rejected=len(rejected),
    )
    return IngestReport(store=store, rejected=tuple(rejected), accepted=accepted)


def ingest_directory(config: SourceConfig) -> IngestReport:
    """
    Load every source file selected by the configuration.

    Args:
        config: Source directory settings.

    Returns:
        The ingest report; unreadable files are listed first among the
        rejections.

    Raises:
        SourceError: If the source directory cannot be scanned.
    """
    sources, unreadable = load_sources(config)
    report = ingest(sources)
    return replace(
        report.with_failures(tuple(unreadable)), directory=config.directory
    )


def _log_rejection(failure: Rejected) -> None:
    logger.warning(
        "document_rejected",
        source=failure.source,
        error=failure.kind,
        reason=failure.reason,
    )
