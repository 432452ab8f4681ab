"""
Ingestion module for Folio.

This module loads raw documents and builds the record store from them.
"""

from folio.ingestion.loader import discover_sources, load_sources
from folio.ingestion.pipeline import ingest, ingest_directory
from folio.ingestion.types import IngestReport, Source

__all__ = [
    "IngestReport",
    "Source",
    "discover_sources",
    "ingest",
    "ingest_directory",
    "load_sources",
]
