"""
Catalog command handlers.

Each handler loads the configured sources and answers one question about
them. Handlers raise Folio errors; the CLI turns them into exit codes.
"""

from typing import Dict, Iterable, List, Optional

from folio.config import FolioConfig
from folio.documents import Document, DocumentFilter
from folio.ingestion import IngestReport, ingest_directory
from folio.utils import get_logger

logger = get_logger(__name__)


def load_catalog(config: FolioConfig) -> IngestReport:
    """
    Ingest the configured source directory.

    Args:
        config: Folio configuration.

    Returns:
        The ingest report.

    Raises:
        SourceError: If the source directory cannot be scanned.
    """
    logger.info("loading_catalog", directory=config.source.directory)
    return ingest_directory(config.source)


def check_command(config: FolioConfig) -> IngestReport:
    """Ingest the sources and return the report for display."""
    report = load_catalog(config)
    if not report.ok:
        logger.warning(
            "catalog_has_rejections",
            rejected=len(report.rejected),
            total=report.total,
        )
    return report


def _draft_filter(config: FolioConfig, drafts: Optional[bool]) -> Optional[bool]:
    if drafts is not None:
        return drafts
    return None if config.catalog.include_drafts else False


def list_command(
    config: FolioConfig,
    tags: Iterable[str] = (),
    match_all: bool = False,
    drafts: Optional[bool] = None,
) -> List[Document]:
    """
    List documents newest first.

    Args:
        config: Folio configuration.
        tags: Only documents carrying these tags.
        match_all: Require all tags instead of any.
        drafts: ``True`` for drafts only, ``False`` for published only,
            ``None`` to follow ``catalog.include_drafts``.

    Returns:
        The matching documents.
    """
    query = load_catalog(config).query()
    document_filter = DocumentFilter.create(
        tags, match_all=match_all, drafts=_draft_filter(config, drafts)
    )
    return list(query.list(document_filter))


def show_command(config: FolioConfig, slug: str) -> Document:
    """
    Look up a single document.

    Raises:
        NotFound: If no document has the slug.
    """
    return load_catalog(config).query().get(slug)


def tags_command(config: FolioConfig, drafts: Optional[bool] = None) -> Dict[str, int]:
    """Count documents per tag."""
    query = load_catalog(config).query()
    return query.tags(DocumentFilter(drafts=_draft_filter(config, drafts)))
