"""
Documents module for Folio.

This module provides the front matter parser, the metadata validator, the
record store and the read-only query façade.
"""

from folio.documents.frontmatter import (
    compose_document,
    dump_front_matter,
    split_front_matter,
)
from folio.documents.query import DocumentFilter, DocumentQuery
from folio.documents.store import DocumentStore
from folio.documents.types import (
    Accepted,
    Document,
    FrontMatter,
    IngestOutcome,
    Rejected,
)
from folio.documents.validation import (
    DocumentMetadata,
    evaluate,
    parse_document,
    parse_metadata,
    validate_metadata,
)

__all__ = [
    "Accepted",
    "Document",
    "DocumentFilter",
    "DocumentMetadata",
    "DocumentQuery",
    "DocumentStore",
    "FrontMatter",
    "IngestOutcome",
    "Rejected",
    "compose_document",
    "dump_front_matter",
    "evaluate",
    "parse_document",
    "parse_metadata",
    "split_front_matter",
    "validate_metadata",
]
