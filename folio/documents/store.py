"""
In-memory record store for validated documents.

The store is filled once, sealed, and then only read. Listing order is
publication date descending with ties broken by slug ascending.
"""

from typing import Callable, Dict, FrozenSet, Iterator, Optional, Tuple

from folio.documents.types import Document
from folio.exceptions import DuplicateSlug, NotFound, StoreSealed
from folio.utils import get_logger

logger = get_logger(__name__)

DocumentPredicate = Callable[[Document], bool]


def listing_key(document: Document) -> Tuple[int, str]:
    """Sort key for newest-first listing with slug as tie breaker."""
    return (-document.date.toordinal(), document.slug)


class DocumentStore:
    """Slug-keyed mapping of documents with deterministic listing."""

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}
        self._ordered: Optional[Tuple[Document, ...]] = None
        self._sealed = False

    def insert(self, document: Document) -> None:
        """
        Add a document to the store.

        Args:
            document: Validated document.

        Raises:
            DuplicateSlug: If a document with the same slug is already stored.
            StoreSealed: If the store has been sealed.
        """
        if self._sealed:
            raise StoreSealed(document.slug)

        existing = self._documents.get(document.slug)
        if existing is not None:
            raise DuplicateSlug(
                document.slug, source=document.source, existing=existing.source
            )

        self._documents[document.slug] = document
        self._ordered = None
        logger.debug("document_inserted", slug=document.slug, source=document.source)

    def get(self, slug: str) -> Document:
        """
        Return the document stored under ``slug``.

        Raises:
            NotFound: If no document has that slug.
        """
        try:
            return self._documents[slug]
        except KeyError:
            raise NotFound(slug) from None

    def list(self, filter: Optional[DocumentPredicate] = None) -> Iterator[Document]:
        """
        Iterate over documents, newest first.

        Every call returns a new iterator over the same ordered snapshot.

        Args:
            filter: Optional predicate; only documents it accepts are yielded.
        """
        snapshot = self._snapshot()
        return (doc for doc in snapshot if filter is None or filter(doc))

    def seal(self) -> None:
        """Refuse further inserts."""
        self._sealed = True
        self._snapshot()

    @property
    def sealed(self) -> bool:
        return self._sealed

    def slugs(self) -> FrozenSet[str]:
        return frozenset(self._documents)

    def _snapshot(self) -> Tuple[Document, ...]:
        if self._ordered is None:
            self._ordered = tuple(sorted(self._documents.values(), key=listing_key))
        return self._ordered

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._documents

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<DocumentStore {len(self)} documents, {state}>"
