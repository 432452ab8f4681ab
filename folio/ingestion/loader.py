"""
Filesystem source loader.

Reads Markdown files from a directory tree and hands them to the ingestion
pipeline as in-memory sources.
"""

from pathlib import Path
from typing import Iterable, List, Tuple

from folio.config.models import SourceConfig
from folio.documents.types import Rejected
from folio.exceptions import SourceError, UnreadableSource
from folio.ingestion.types import Source
from folio.utils import get_logger

logger = get_logger(__name__)


def discover_sources(
    directory: Path,
    include_patterns: Iterable[str] = ("**/*.md",),
    exclude_patterns: Iterable[str] = (),
) -> List[Path]:
    """
    Find source files under a directory.

    Args:
        directory: Root directory to scan.
        include_patterns: Glob patterns, relative to ``directory``.
        exclude_patterns: Glob patterns removed from the matches.

    Returns:
        Matching files, sorted by path.

    Raises:
        SourceError: If the directory doesn't exist or isn't a directory.
    """
    if not directory.exists():
        raise SourceError("Source directory not found", path=str(directory))
    if not directory.is_dir():
        raise SourceError("Source path is not a directory", path=str(directory))

    matches = set()
    for pattern in include_patterns:
        matches.update(path for path in directory.glob(pattern) if path.is_file())
    for pattern in exclude_patterns:
        matches.difference_update(directory.glob(pattern))

    return sorted(matches)


def load_sources(config: SourceConfig) -> Tuple[List[Source], List[Rejected]]:
    """
    Read every source file selected by the configuration.

    Args:
        config: Source directory settings.

    Returns:
        The readable sources and a rejection for each file that could not be
        read or decoded.
    """
    root = Path(config.directory)
    paths = discover_sources(root, config.include_patterns, config.exclude_patterns)
    logger.info("sources_discovered", directory=str(root), count=len(paths))

    sources: List[Source] = []
    unreadable: List[Rejected] = []
    for path in paths:
        identifier = path.relative_to(root).as_posix()
        try:
            # Line endings are kept as stored
            text = path.read_bytes().decode(config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            error = UnreadableSource(f"cannot read source: {e}", source=identifier)
            logger.warning("source_unreadable", source=identifier, error=str(e))
            unreadable.append(Rejected(identifier, error))
            continue
        sources.append(Source(identifier, text))

    return sources, unreadable
